"""Apply line-range edit plans to document text."""

from __future__ import annotations

from dart_librarian.models import EditOp


def line_offsets(text: str) -> list[int]:
    """Character offset of the start of every line, plus one past the end."""
    offsets = [0]
    for line in text.split("\n"):
        offsets.append(offsets[-1] + len(line) + 1)
    return offsets


def _offset(offsets: list[int], line: int, text_length: int) -> int:
    if line >= len(offsets):
        return text_length
    return min(offsets[line], text_length)


def apply_edits(text: str, edits: list[EditOp]) -> str:
    """Apply non-overlapping edits, all expressed against the original text."""
    offsets = line_offsets(text)
    result = text
    for edit in sorted(edits, key=lambda e: (e.start_line, e.end_line), reverse=True):
        if edit.end_line < edit.start_line:
            raise ValueError(f"Invalid edit range: {edit.start_line}..{edit.end_line}")
        start = _offset(offsets, edit.start_line, len(text))
        end = _offset(offsets, edit.end_line, len(text))
        result = result[:start] + edit.replacement + result[end:]
    return result
