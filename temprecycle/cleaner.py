"""Deletion of unprotected files and empty folders under a directory."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterator, TextIO

from temprecycle import scanner
from temprecycle.messages import show_error, show_info


class _Kind(Enum):
    FILE = "file"
    FOLDER = "folder"


@dataclass(frozen=True)
class _Event:
    kind: _Kind
    path: Path
    error: OSError | None = None

    @property
    def message(self) -> str:
        if self.error is None:
            return f"Deleted {self.kind.value}: {self.path}"
        return f"Could not delete {self.kind.value}: {self.error}"


@dataclass
class CleanupReport:
    """What a cleanup deleted and which deletions failed."""

    deleted_files: list[Path] = field(default_factory=list)
    deleted_folders: list[Path] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    def _record(self, event: _Event) -> None:
        if event.error is not None:
            self.errors.append(event.message)
        elif event.kind is _Kind.FILE:
            self.deleted_files.append(event.path)
        else:
            self.deleted_folders.append(event.path)


def _list(directory: Path) -> list[os.DirEntry[str]]:
    try:
        with os.scandir(directory) as listing:
            return list(listing)
    except PermissionError:
        return []


def _iter_files(directory: Path) -> Iterator[Path]:
    for entry in _list(directory):
        try:
            if entry.is_dir():
                if not entry.is_symlink():
                    yield from _iter_files(Path(entry.path))
            elif entry.is_file():
                yield Path(entry.path)
        except PermissionError:
            continue


def _is_empty(directory: Path) -> bool:
    with os.scandir(directory) as listing:
        return next(listing, None) is None


def _prune(directory: Path) -> Iterator[_Event]:
    # Pre-order: a folder is checked before its children are cleared.
    for entry in _list(directory):
        try:
            if not entry.is_dir():
                continue
        except OSError:
            continue
        path = Path(entry.path)
        try:
            if _is_empty(path):
                if entry.is_symlink():
                    path.unlink()
                else:
                    path.rmdir()
                yield _Event(_Kind.FOLDER, path)
            elif not entry.is_symlink():
                yield from _prune(path)
        except OSError as exc:
            yield _Event(_Kind.FOLDER, path, exc)


def _cleanup(path: str | os.PathLike[str]) -> Iterator[_Event]:
    root = Path(path)
    if not root.is_dir():
        with os.scandir(root):
            pass
    for file in _iter_files(root):
        if scanner.is_protected(file):
            continue
        try:
            file.unlink()
        except OSError as exc:
            yield _Event(_Kind.FILE, file, exc)
        else:
            yield _Event(_Kind.FILE, file)
    yield from _prune(root)


def delete_unprotected(path: str | os.PathLike[str]) -> CleanupReport:
    """Delete every unprotected file under *path*, then its empty folders.

    Raises OSError when *path* cannot be listed.
    """
    report = CleanupReport()
    for event in _cleanup(path):
        report._record(event)
    return report


def remove_all(
    path: str | os.PathLike[str],
    file_count: int = 0,
    folder_count: int = 0,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> CleanupReport | None:
    """Ask for confirmation, then clean *path* and report each deletion.

    Returns the report, or None when the user did not confirm.
    """
    inp = sys.stdin if stdin is None else stdin
    out = sys.stdout if stdout is None else stdout

    out.write("\nDo you want to delete the scanned files? (Y/N): ")
    out.flush()
    answer = inp.readline().rstrip("\r\n")

    if not answer:
        show_error("No data was written", out)
        return None
    if answer not in ("Y", "y"):
        show_info("Cancel Operation", out)
        return None

    report = CleanupReport()
    for event in _cleanup(path):
        report._record(event)
        if event.error is None:
            show_info(event.message, out)
        else:
            show_error(event.message, out)
    show_info("Cleanup completed.", out)
    return report