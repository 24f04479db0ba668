"""Console output for scan progress and results."""

from typing import List, Optional, Protocol, Tuple

from rich.console import Console
from rich.markup import escape
from rich.progress import BarColumn, Progress, SpinnerColumn, TaskProgressColumn, TextColumn


class ConsoleLogging(Protocol):
    def log_progress(self, text: str) -> None:
        ...

    def log_count(self, prefix: str, count: int, suffix: str) -> None:
        ...

    def log_error(self, text: str) -> None:
        ...

    def log_warning(self, text: str) -> None:
        ...

    def log_key(self, text: str) -> None:
        ...

    def start_progress(self, description: str, total: int) -> None:
        ...

    def advance(self, amount: int = 1) -> None:
        ...

    def finish_progress(self) -> None:
        ...


class ConsoleLogger:
    """Writes colored progress lines and unused keys to a rich console."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console(highlight=False)
        self._progress: Optional[Progress] = None
        self._task = None

    def log_progress(self, text: str) -> None:
        self.console.print(f"\n[yellow]{escape(text)}[/yellow]")

    def log_count(self, prefix: str, count: int, suffix: str) -> None:
        self.console.print(
            f"\n[yellow]{escape(prefix)}[/yellow] [green]{count}[/green] [yellow]{escape(suffix)}[/yellow]"
        )

    def log_error(self, text: str) -> None:
        self.console.print(f"[red]{escape(text)}[/red]")

    def log_warning(self, text: str) -> None:
        self.console.print(f"[yellow]⚠ {escape(text)}[/yellow]")

    def log_key(self, text: str) -> None:
        self.console.print(f"[red]{escape(text)}[/red]", soft_wrap=True)

    def start_progress(self, description: str, total: int) -> None:
        """Show a progress bar; lines logged meanwhile are printed above it."""
        self.finish_progress()
        self._progress = Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            TaskProgressColumn(),
            console=self.console,
            transient=True,
        )
        self._progress.start()
        self._task = self._progress.add_task(description, total=total)

    def advance(self, amount: int = 1) -> None:
        if self._progress is not None:
            self._progress.update(self._task, advance=amount)

    def finish_progress(self) -> None:
        if self._progress is not None:
            self._progress.stop()
            self._progress = None
            self._task = None


class RecordingLogger:
    """Logger that records every call, for tests."""

    def __init__(self):
        self.records: List[Tuple[str, str]] = []
        self.progress_total = 0
        self.progress_done = 0

    def log_progress(self, text: str) -> None:
        self.records.append(("progress", text))

    def log_count(self, prefix: str, count: int, suffix: str) -> None:
        self.records.append(("progress", f"{prefix} {count} {suffix}"))

    def log_error(self, text: str) -> None:
        self.records.append(("error", text))

    def log_warning(self, text: str) -> None:
        self.records.append(("warning", text))

    def log_key(self, text: str) -> None:
        self.records.append(("key", text))

    def start_progress(self, description: str, total: int) -> None:
        self.progress_total = total
        self.progress_done = 0

    def advance(self, amount: int = 1) -> None:
        self.progress_done += amount

    def finish_progress(self) -> None:
        pass

    def messages(self, kind: str) -> List[str]:
        """Get the text of every record of one kind, in order."""
        return [text for record_kind, text in self.records if record_kind == kind]
