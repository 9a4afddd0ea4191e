"""Tests for the export / remove-export command flows."""

from pathlib import Path

import pytest

from dart_librarian.commands import (
    Choice,
    LibRootNotFoundError,
    NotInLibError,
    create_export_file,
    export_file,
    remove_file_export,
    resolve_source,
)
from dart_librarian.models import CommandStatus


class FakePrompter:
    """Scripted prompter that records every interaction."""

    def __init__(self, pick=None, text=None):
        self.pick = pick  # callable(options) -> Choice | None
        self.text = text
        self.choices: list[list[Choice]] = []
        self.prompts: list[str] = []
        self.messages: list[tuple[str, str]] = []

    def choose(self, options, placeholder):
        self.choices.append(options)
        return self.pick(options) if self.pick else None

    def ask_text(self, prompt, placeholder=""):
        self.prompts.append(prompt)
        return self.text

    def info(self, message):
        self.messages.append(("info", message))

    def warning(self, message):
        self.messages.append(("warning", message))


def _pick_label(label):
    def pick(options):
        return next(o for o in options if o.label == label)
    return pick


@pytest.fixture
def package(tmp_path):
    lib = tmp_path / "my_pkg" / "lib"
    (lib / "src" / "models").mkdir(parents=True)
    (lib / "my_pkg.dart").write_text(
        "library my_pkg;\n\nexport 'src/models/account.dart';\nexport 'src/models/zebra.dart';\n"
    )
    (lib / "_private.dart").write_text("")
    (lib / "src" / "models" / "account.dart").write_text("class Account {}\n")
    (lib / "src" / "models" / "user.dart").write_text("class User {}\n")
    (lib / "src" / "models" / "zebra.dart").write_text("class Zebra {}\n")
    return lib


class TestResolveSource:
    def test_valid(self, package):
        source, lib_root = resolve_source(package / "src" / "models" / "user.dart")
        assert lib_root == package

    def test_wrong_extension(self, package):
        with pytest.raises(NotInLibError, match="Dart file"):
            resolve_source(package / "notes.txt")

    def test_outside_lib(self, tmp_path):
        with pytest.raises(LibRootNotFoundError):
            resolve_source(tmp_path / "bin" / "main.dart")

    def test_errors_are_value_errors(self, tmp_path):
        with pytest.raises(ValueError):
            resolve_source(tmp_path / "main.dart")


class TestExportFile:
    def test_adds_sorted_export(self, package):
        source = package / "src" / "models" / "user.dart"
        prompter = FakePrompter(pick=_pick_label("my_pkg.dart"))

        result = export_file(source, prompter)

        assert result.status is CommandStatus.APPLIED
        assert result.target == package / "my_pkg.dart"
        assert result.line == 3
        assert (package / "my_pkg.dart").read_text() == (
            "library my_pkg;\n\n"
            "export 'src/models/account.dart';\n"
            "export 'src/models/user.dart';\n"
            "export 'src/models/zebra.dart';\n"
        )

    def test_choices_exclude_private_and_offer_create(self, package):
        prompter = FakePrompter()
        export_file(package / "src" / "models" / "user.dart", prompter)

        options = prompter.choices[0]
        labels = [o.label for o in options]
        assert labels == ["my_pkg.dart", "Create new file..."]
        assert options[0].description == "(has library)"
        assert options[-1].create_new

    def test_cancelled_choice_writes_nothing(self, package):
        before = (package / "my_pkg.dart").read_text()
        result = export_file(package / "src" / "models" / "user.dart", FakePrompter())

        assert result.status is CommandStatus.CANCELLED
        assert (package / "my_pkg.dart").read_text() == before

    def test_duplicate_warns(self, package):
        prompter = FakePrompter(pick=_pick_label("my_pkg.dart"))
        result = export_file(package / "src" / "models" / "account.dart", prompter)

        assert result.status is CommandStatus.DUPLICATE
        assert ("warning", "This export statement already exists.") in prompter.messages

    def test_source_file_not_offered(self, package):
        (package / "widgets.dart").write_text("")
        prompter = FakePrompter()
        export_file(package / "my_pkg.dart", prompter)

        labels = [o.label for o in prompter.choices[0]]
        assert "my_pkg.dart" not in labels
        assert "widgets.dart" in labels

    def test_create_new_file_from_choice(self, package):
        prompter = FakePrompter(pick=lambda options: options[-1], text="features/models.dart")
        result = export_file(package / "src" / "models" / "user.dart", prompter)

        created = package / "features" / "models.dart"
        assert result.status is CommandStatus.APPLIED
        assert result.target == created
        assert created.read_text() == "export '../src/models/user.dart';\n\n"

    def test_create_new_with_existing_name_keeps_content(self, package):
        prompter = FakePrompter(pick=lambda options: options[-1], text="my_pkg.dart")
        result = export_file(package / "src" / "models" / "user.dart", prompter)

        assert result.status is CommandStatus.APPLIED
        assert result.target == package / "my_pkg.dart"
        assert (package / "my_pkg.dart").read_text() == (
            "library my_pkg;\n\n"
            "export 'src/models/account.dart';\n"
            "export 'src/models/user.dart';\n"
            "export 'src/models/zebra.dart';\n"
        )

    def test_no_candidates_prompts_for_name(self, tmp_path):
        lib = tmp_path / "lib"
        lib.mkdir()
        source = lib / "a.dart"
        source.write_text("")
        prompter = FakePrompter(text="barrel.dart")

        result = export_file(source, prompter)

        assert prompter.choices == []
        assert prompter.prompts[0].startswith("No export file found")
        assert result.status is CommandStatus.APPLIED
        assert (lib / "barrel.dart").read_text() == "export 'a.dart';\n\n"

    def test_empty_name_cancels(self, tmp_path):
        lib = tmp_path / "lib"
        lib.mkdir()
        (lib / "a.dart").write_text("")

        result = export_file(lib / "a.dart", FakePrompter(text="   "))

        assert result.status is CommandStatus.CANCELLED
        assert sorted(p.name for p in lib.iterdir()) == ["a.dart"]

    def test_explicit_target(self, package):
        result = export_file(
            package / "src" / "models" / "user.dart",
            FakePrompter(),
            target=package / "my_pkg.dart",
        )
        assert result.applied
        assert "export 'src/models/user.dart';" in (package / "my_pkg.dart").read_text()

    def test_not_in_lib(self, tmp_path):
        (tmp_path / "a.dart").write_text("")
        with pytest.raises(NotInLibError):
            export_file(tmp_path / "a.txt", FakePrompter())


class TestRemoveFileExport:
    def test_removes_export(self, package):
        prompter = FakePrompter(pick=_pick_label("my_pkg.dart"))
        result = remove_file_export(package / "src" / "models" / "zebra.dart", prompter)

        assert result.status is CommandStatus.APPLIED
        assert (package / "my_pkg.dart").read_text() == (
            "library my_pkg;\n\nexport 'src/models/account.dart';\n"
        )

    def test_only_exporting_files_offered(self, package):
        (package / "src" / "models" / "models.dart").write_text("export 'zebra.dart';\n")
        (package / "other.dart").write_text("export 'src/models/user.dart';\n")
        prompter = FakePrompter()

        remove_file_export(package / "src" / "models" / "zebra.dart", prompter)

        labels = sorted(o.label for o in prompter.choices[0])
        assert labels == ["my_pkg.dart", "src/models/models.dart"]

    def test_nested_library_uses_its_own_relative_path(self, package):
        nested = package / "src" / "models" / "models.dart"
        nested.write_text("export 'account.dart';\nexport 'zebra.dart';\n")
        prompter = FakePrompter(pick=_pick_label("src/models/models.dart"))

        result = remove_file_export(package / "src" / "models" / "zebra.dart", prompter)

        assert result.applied
        assert nested.read_text() == "export 'account.dart';\n"

    def test_not_exported_anywhere(self, package):
        prompter = FakePrompter()
        result = remove_file_export(package / "src" / "models" / "user.dart", prompter)

        assert result.status is CommandStatus.NO_CANDIDATES
        assert prompter.choices == []
        assert ("warning", "No library file exports this file.") in prompter.messages

    def test_no_library_files(self, tmp_path):
        lib = tmp_path / "lib"
        lib.mkdir()
        (lib / "only.dart").write_text("")
        prompter = FakePrompter()

        result = remove_file_export(lib / "only.dart", prompter)

        assert result.status is CommandStatus.NO_CANDIDATES
        assert ("info", "No library file is available.") in prompter.messages

    def test_cancelled(self, package):
        before = (package / "my_pkg.dart").read_text()
        result = remove_file_export(package / "src" / "models" / "zebra.dart", FakePrompter())

        assert result.status is CommandStatus.CANCELLED
        assert (package / "my_pkg.dart").read_text() == before

    def test_explicit_target_not_found(self, package):
        prompter = FakePrompter()
        result = remove_file_export(
            package / "src" / "models" / "user.dart",
            prompter,
            target=package / "my_pkg.dart",
        )

        assert result.status is CommandStatus.NOT_FOUND
        assert prompter.messages == [
            ("warning", "Export statement not found in the selected library file."),
        ]


def test_export_then_remove_round_trip(package):
    barrel = package / "my_pkg.dart"
    before = barrel.read_text()
    source = package / "src" / "models" / "user.dart"

    export_file(source, FakePrompter(pick=_pick_label("my_pkg.dart")))
    remove_file_export(source, FakePrompter(pick=_pick_label("my_pkg.dart")))

    assert barrel.read_text() == before


def test_create_export_file(tmp_path):
    candidate = create_export_file(tmp_path, "a/b/c.dart")
    assert candidate.path == tmp_path / "a" / "b" / "c.dart"
    assert candidate.path.read_text() == ""
    assert candidate.relative_path == "a/b/c.dart"
    assert candidate.has_library is False


def test_create_export_file_existing_is_not_truncated(tmp_path):
    existing = tmp_path / "barrel.dart"
    existing.write_text("library barrel;\n\nexport 'a.dart';\n")

    candidate = create_export_file(tmp_path, "barrel.dart")

    assert candidate.path == existing
    assert existing.read_text() == "library barrel;\n\nexport 'a.dart';\n"
    assert candidate.has_library is True
