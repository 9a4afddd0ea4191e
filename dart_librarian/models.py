"""Data models shared by the locator, scanner, editor and command shell."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class ExportCandidate:
    """A Dart file under a lib root that could receive export statements."""
    path: Path
    relative_path: str  # forward slashes, relative to the lib root
    has_library: bool = False

    @property
    def label(self) -> str:
        return self.relative_path

    @property
    def description(self) -> str:
        return "(has library)" if self.has_library else ""


@dataclass(frozen=True)
class ExportBlock:
    """First contiguous run of relative export lines in a document."""
    start_line: int
    end_line: int  # inclusive
    lines: list[str] = field(default_factory=list)  # trimmed


@dataclass(frozen=True)
class EditOp:
    """Replace lines ``[start_line, end_line)`` with ``replacement``.

    Positions are column 0 of each line; a position past the end of the
    document clamps to the end of the text.
    """
    start_line: int
    end_line: int
    replacement: str = ""

    def to_dict(self) -> dict:
        return {
            "start_line": self.start_line,
            "end_line": self.end_line,
            "replacement": self.replacement,
        }


@dataclass
class AddExportResult:
    edits: list[EditOp] = field(default_factory=list)
    duplicate: bool = False
    line: int | None = None  # where the statement sits once edits are applied


@dataclass
class RemoveExportResult:
    edits: list[EditOp] = field(default_factory=list)
    not_found: bool = False


class CommandStatus(enum.Enum):
    APPLIED = "applied"
    CANCELLED = "cancelled"
    DUPLICATE = "duplicate"
    NOT_FOUND = "not_found"
    NO_CANDIDATES = "no_candidates"


@dataclass
class CommandResult:
    """Outcome of an export or remove-export command."""
    status: CommandStatus
    target: Path | None = None
    message: str | None = None
    line: int | None = None

    @property
    def applied(self) -> bool:
        return self.status is CommandStatus.APPLIED


@dataclass
class LibrarianConfig:
    """Naming conventions the tool relies on."""
    lib_dir_name: str = "lib"
    extension: str = ".dart"
    private_prefix: str = "_"
    skip_dirs: list[str] = field(default_factory=lambda: [
        ".dart_tool", ".git", "build", ".idea", ".fvm",
    ])
