"""Sort order for relative export statements.

Statements are ordered by the stem of the exported file's base name:

- a generated companion (``user.freezed.dart``) sorts right after its
  origin (``user.dart``);
- when one stem is a case-insensitive prefix of the other (``user`` vs
  ``user_repository``) the shorter one sorts first;
- everything else uses a case-insensitive natural order, so ``file2``
  comes before ``file10``.
"""

from __future__ import annotations

import functools
import posixpath
import re

_EXPORT_PATH_RE = re.compile(r"export\s+'(.*)';")
_DIGITS_RE = re.compile(r"(\d+)")

DART_EXTENSION = ".dart"
GENERATED_MARKER = ".freezed"


def natural_key(value: str) -> tuple:
    """Case-insensitive key where digit runs compare by numeric value."""
    parts = []
    for chunk in _DIGITS_RE.split(value):
        if not chunk:
            continue
        if chunk.isdigit():
            parts.append((0, int(chunk), chunk))
        else:
            parts.append((1, 0, chunk.casefold()))
    return tuple(parts)


def split_export_name(
    file_name: str,
    extension: str = DART_EXTENSION,
    generated_marker: str = GENERATED_MARKER,
) -> tuple[str, bool]:
    """Return ``(stem, is_generated)`` for an exported file's base name."""
    generated_suffix = generated_marker + extension
    if file_name.endswith(generated_suffix):
        return file_name[:-len(generated_suffix)], True
    if file_name.endswith(extension):
        return file_name[:-len(extension)], False
    return file_name, False


def _cmp(a, b) -> int:
    return (a > b) - (a < b)


def compare_exports(a: str, b: str) -> int:
    """Three-way comparison of two export statements."""
    match_a = _EXPORT_PATH_RE.search(a)
    match_b = _EXPORT_PATH_RE.search(b)
    if not match_a or not match_b:
        return _cmp(natural_key(a), natural_key(b)) or _cmp(a, b)

    base_a, generated_a = split_export_name(posixpath.basename(match_a.group(1)))
    base_b, generated_b = split_export_name(posixpath.basename(match_b.group(1)))

    fold_a, fold_b = base_a.casefold(), base_b.casefold()
    if fold_a == fold_b:
        # Case-only differences: origin first, then the raw stem.
        return _cmp(generated_a, generated_b) or _cmp(base_a, base_b)

    if fold_a.startswith(fold_b) or fold_b.startswith(fold_a):
        return _cmp(len(fold_a), len(fold_b))

    return _cmp(natural_key(base_a), natural_key(base_b))


def sort_export_statements(statements: list[str]) -> list[str]:
    """Return a new, stably sorted list of export statements."""
    return sorted(statements, key=functools.cmp_to_key(compare_exports))
