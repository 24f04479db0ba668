import pytest

from unused_localization.config import ScanSettings
from unused_localization.errors import RootPathNotFound
from unused_localization.scanning.file_scanner import FileKind, FileScanner
from unused_localization.scanning.filesystem import FileSystemEnumerator, InMemoryFileSystem

STRINGS_ABC = '"a" = "A";\n"b" = "B";\n"c" = "C";\n'


def unused(result):
    return {k.key for k in result.unused_keys()}


def test_unused_keys_end_to_end(make_scanner):
    scanner, _ = make_scanner({
        "App/en.lproj/Localizable.strings": STRINGS_ABC,
        "App/ViewController.swift": 'let title = "a"\n',
    })
    result = scanner.scan("/project")
    assert {k.key for k in result.defined_keys} == {"a", "b", "c"}
    assert unused(result) == {"b", "c"}
    assert result.resource_files == 1
    assert result.source_files == 1


def test_unused_keys_are_sorted(make_scanner):
    scanner, _ = make_scanner({"Localizable.strings": '"zeta" = "";\n"alpha" = "";\n"mid" = "";\n'})
    result = scanner.scan("/project")
    assert [k.key for k in result.unused_keys()] == ["alpha", "mid", "zeta"]


@pytest.mark.parametrize(
    "path",
    [
        "Pods/SomePod/en.lproj/Localizable.strings",
        "Carthage/Checkouts/Lib/en.lproj/Localizable.strings",
        "App/en.lproj/InfoPlist.strings",
        ".build/en.lproj/Localizable.strings",
    ],
)
def test_excluded_resource_files_are_never_scanned(make_scanner, path):
    scanner, fs = make_scanner({path: '"vendor.key" = "Vendor";\n'})
    result = scanner.scan("/project")
    assert result.defined_keys == set()
    assert fs.reads == []


@pytest.mark.parametrize("directory", ["Pods/Lib", "Carthage/Checkouts/Lib"])
def test_keys_used_from_dependency_swift_files(make_scanner, directory):
    scanner, _ = make_scanner({
        "App/en.lproj/Localizable.strings": '"used.in.pod" = "Used";\n',
        f"{directory}/Lib.swift": 'let k = "used.in.pod"\n',
    })
    result = scanner.scan("/project")
    assert "used.in.pod" in result.used_literals
    assert unused(result) == set()
    assert result.source_files == 1


def test_extra_excluded_component(make_scanner):
    scanner, _ = make_scanner(
        {
            "Vendor/en.lproj/Localizable.strings": '"vendor.key" = "Vendor";\n',
            "App/en.lproj/Localizable.strings": '"app.key" = "App";\n',
        },
        excluded_components=("Pods", "Carthage", "Vendor"),
    )
    result = scanner.scan("/project")
    assert {k.key for k in result.defined_keys} == {"app.key"}


def test_lproj_filter(make_scanner):
    scanner, _ = make_scanner(
        {
            "App/en.lproj/Localizable.strings": '"en.only" = "English";\n',
            "App/tr.lproj/Localizable.strings": '"tr.only" = "Türkçe";\n',
        },
        lproj="tr",
    )
    result = scanner.scan("/project")
    assert {k.key for k in result.defined_keys} == {"tr.only"}


def test_classify():
    scanner = FileScanner(None, None, None, None, None, ScanSettings())
    assert scanner.classify("App/Base.lproj/Main.STRINGS") is FileKind.RESOURCE
    assert scanner.classify("App/View.swift") is FileKind.SOURCE
    assert scanner.classify("App/Info.plist") is FileKind.IGNORED
    assert scanner.classify("Pods/Lib/Thing.swift") is FileKind.SOURCE
    assert scanner.classify("Carthage/Checkouts/Lib/Thing.swift") is FileKind.SOURCE
    # Components above the scan root are not considered
    assert scanner.classify("/work/Pods/App/a.strings", root="/work/Pods/App") is FileKind.RESOURCE


def test_duplicate_keys_across_files_collapse(make_scanner):
    scanner, _ = make_scanner({
        "App/en.lproj/Localizable.strings": '"shared" = "Shared";\n',
        "App/de.lproj/Localizable.strings": '\n"shared" = "Geteilt";\n',
    })
    result = scanner.scan("/project")
    assert len(result.defined_keys) == 1
    assert len(result.occurrences["shared"]) == 2
    assert result.locations_of("shared") == [
        "/project/App/de.lproj/Localizable.strings:2",
        "/project/App/en.lproj/Localizable.strings:1",
    ]


def test_decode_failure_is_isolated(make_scanner, logger):
    scanner, _ = make_scanner({
        "App/en.lproj/Broken.strings": b"\xff",
        "App/en.lproj/Localizable.strings": '"good.key" = "Good";\n',
    })
    result = scanner.scan("/project")
    assert {k.key for k in result.defined_keys} == {"good.key"}
    assert [(f.path, f.kind) for f in result.failed_files] == [
        ("/project/App/en.lproj/Broken.strings", "decode"),
    ]
    (warning,) = logger.messages("warning")
    assert warning.startswith("Could not read file: /project/App/en.lproj/Broken.strings")


def test_parse_failure_is_isolated(make_scanner, logger):
    scanner, _ = make_scanner({
        "Localizable.strings": STRINGS_ABC,
        "Broken.swift": 'let = = "b" {{{\n',
        "Good.swift": 'let x = "a"\n',
    })
    result = scanner.scan("/project")
    assert unused(result) == {"b", "c"}
    assert [f.kind for f in result.failed_files] == ["parse"]
    assert logger.messages("warning")[0].startswith("Could not parse file: /project/Broken.swift")


def test_progress_reports_every_candidate(make_scanner, logger):
    scanner, _ = make_scanner({
        "Localizable.strings": STRINGS_ABC,
        "A.swift": 'let x = "a"\n',
        "B.swift": 'let y = "b"\n',
        "README.md": "# readme",
    })
    scanner.scan("/project")
    assert logger.progress_total == 3
    assert logger.progress_done == 3
    assert "Found 3 files to scan." in logger.messages("progress")


def test_scan_is_idempotent(make_scanner):
    scanner, _ = make_scanner({
        "Localizable.strings": STRINGS_ABC,
        "A.swift": 'let x = "a"\n',
    })
    assert unused(scanner.scan("/project")) == unused(scanner.scan("/project"))


class ReversedFileSystem(InMemoryFileSystem):
    def enumerate(self, root):
        return reversed(list(super().enumerate(root)))


def test_result_independent_of_dispatch_order(strings_parser, extractor, logger):
    files = {
        f"Module{i}/en.lproj/Localizable.strings": f'"key.{i}" = "v";\n"shared" = "s";\n'
        for i in range(10)
    }
    files.update({f"Module{i}/View.swift": f'let k = "key.{i * 2}"\n' for i in range(10)})

    results = []
    for fs, workers in ((InMemoryFileSystem(files), 1), (ReversedFileSystem(files), 8)):
        scanner = FileScanner(strings_parser, extractor, fs, fs, logger, ScanSettings(max_workers=workers))
        results.append(scanner.scan("/project"))

    first, second = results
    assert first.defined_keys == second.defined_keys
    assert first.used_literals == second.used_literals
    assert unused(first) == unused(second) == {"key.1", "key.3", "key.5", "key.7", "key.9", "shared"}


def test_missing_root_in_memory(make_scanner):
    scanner, _ = make_scanner({})
    with pytest.raises(RootPathNotFound):
        scanner.scan("/elsewhere")


def test_filesystem_enumerator_skips_hidden(tmp_path):
    (tmp_path / "App").mkdir()
    (tmp_path / "App" / "View.swift").write_text('let x = "a"\n')
    (tmp_path / ".git").mkdir()
    (tmp_path / ".git" / "config.strings").write_text('"hidden" = "h";\n')
    (tmp_path / "App" / ".DS_Store").write_bytes(b"\x00")

    paths = list(FileSystemEnumerator().enumerate(tmp_path))
    assert paths == [tmp_path / "App" / "View.swift"]


def test_filesystem_enumerator_missing_root(tmp_path):
    with pytest.raises(RootPathNotFound):
        FileSystemEnumerator().enumerate(tmp_path / "missing")

    (tmp_path / "file.txt").write_text("x")
    with pytest.raises(RootPathNotFound):
        FileSystemEnumerator().enumerate(tmp_path / "file.txt")


def test_missing_root_is_a_file_not_found_error():
    assert issubclass(RootPathNotFound, FileNotFoundError)
    assert str(RootPathNotFound("nowhere")) == "Directory not found: nowhere"
