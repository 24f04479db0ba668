"""Text decoding helpers for resource and source files."""

from typing import Sequence, Tuple

# .strings files are commonly saved as UTF-16 by older Xcode versions
RESOURCE_ENCODINGS: Tuple[str, ...] = ("utf-8", "utf-16", "utf-16-be", "utf-16-le")
SOURCE_ENCODINGS: Tuple[str, ...] = ("utf-8",)


def decode_text(data: bytes, encodings: Sequence[str] = RESOURCE_ENCODINGS) -> Tuple[str, str]:
    """
    Decode bytes with the first encoding that succeeds.

    Args:
        data: Raw file content
        encodings: Encodings to attempt, in order

    Returns:
        Tuple of (decoded text, encoding used)

    Raises:
        UnicodeDecodeError: If none of the encodings can decode the data
    """
    last_error = None
    for encoding in encodings:
        try:
            return data.decode(encoding), encoding
        except UnicodeDecodeError as e:
            last_error = e

    if last_error is None:
        raise ValueError("No encodings given")
    raise last_error
