"""Recursive scan of a directory: file and folder counts, total size, protected files."""

from __future__ import annotations

import os
import stat
import sys
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Callable, TextIO

from temprecycle import cleaner
from temprecycle.messages import show_date, show_error, show_info
from temprecycle.progress import progress_bar
from temprecycle.sizes import format_bytes

_PROTECTED_ATTRIBUTES = stat.FILE_ATTRIBUTE_HIDDEN | stat.FILE_ATTRIBUTE_SYSTEM


class _Outcome(Enum):
    COUNTED = "counted"
    PROTECTED = "protected"
    FAILED = "failed"


@dataclass
class ScanResult:
    """What a scan found under *root*."""

    root: Path
    files: list[Path] = field(default_factory=list)
    folders: list[Path] = field(default_factory=list)
    protected: list[Path] = field(default_factory=list)
    failed: list[Path] = field(default_factory=list)
    file_count: int = 0
    total_size: int = 0

    @property
    def folder_count(self) -> int:
        return len(self.folders)

    @property
    def summary(self) -> str:
        return (
            f"Total Files: {self.file_count} | Folders: {self.folder_count}"
            f" | Size: {format_bytes(self.total_size)}"
        )


def is_protected(path: str | os.PathLike[str]) -> bool:
    """Tell whether a file is hidden or a system file and must be left alone.

    Names starting with a dot count as hidden; where the platform reports file
    attributes, the hidden and system attributes count too. A path that cannot
    be inspected is not protected.
    """
    path = Path(path)
    if path.name.startswith("."):
        return True
    try:
        info = os.lstat(path)
    except OSError:
        return False
    return bool(getattr(info, "st_file_attributes", 0) & _PROTECTED_ATTRIBUTES)


def _collect(root: Path) -> tuple[list[Path], list[Path]]:
    files: list[Path] = []
    folders: list[Path] = []

    def visit(directory: Path) -> None:
        try:
            with os.scandir(directory) as listing:
                entries = list(listing)
        except PermissionError:
            return
        for entry in entries:
            try:
                if entry.is_dir():
                    folders.append(Path(entry.path))
                    if not entry.is_symlink():
                        visit(Path(entry.path))
                elif entry.is_file():
                    files.append(Path(entry.path))
            except PermissionError:
                continue

    visit(root)
    return files, folders


def _measure(file: Path, result: ScanResult) -> _Outcome:
    if is_protected(file):
        result.protected.append(file)
        return _Outcome.PROTECTED
    try:
        size = file.stat().st_size
    except OSError:
        result.failed.append(file)
        return _Outcome.FAILED
    result.total_size += size
    result.file_count += 1
    return _Outcome.COUNTED


def _scan(
    path: str | os.PathLike[str],
    on_file: Callable[[Path, _Outcome, ScanResult], None] | None = None,
) -> ScanResult:
    root = Path(path)
    files, folders = _collect(root)
    result = ScanResult(root=root, files=files, folders=folders)
    for file in files:
        outcome = _measure(file, result)
        if on_file is not None:
            on_file(file, outcome, result)
    return result


def scan_directory(path: str | os.PathLike[str]) -> ScanResult:
    """Walk *path* recursively and total the sizes of its unprotected files.

    Raises OSError when *path* cannot be listed; directories below it that
    deny access are skipped.
    """
    return _scan(path)


def _read_line(stream: TextIO) -> str:
    return stream.readline().rstrip("\r\n")


def get_file_and_size(
    path: str | os.PathLike[str],
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> ScanResult | None:
    """Scan *path* with progress bars, show the totals and offer to clean it.

    Returns the scan result, or None when the scan itself failed.
    """
    inp = sys.stdin if stdin is None else stdin
    out = sys.stdout if stdout is None else stdout

    def report(file: Path, outcome: _Outcome, result: ScanResult) -> None:
        if outcome is _Outcome.PROTECTED:
            show_error(f"Protected file: {file}", out)
            return
        if outcome is _Outcome.FAILED:
            show_error(f"Error accessing: {file}", out)
        progress_bar(result.file_count, len(result.files), "Files:", 2, out)

    try:
        result = _scan(path, report)
    except OSError as exc:
        show_error(f"Scan error: {exc}", out)
        return None

    for count, _ in enumerate(result.folders, start=1):
        progress_bar(count, result.folder_count, "Folders:", 3, out)

    show_date(result.summary, out)

    out.write("You wanna clean TEMP Folder? Push (Y) to remove. (N) to cancel\n> ")
    out.flush()
    answer = _read_line(inp)

    if not answer:
        show_error("No data was entered", out)
        out.write("Push any key to close \n")
        inp.readline()
    elif answer in ("Y", "y"):
        cleaner.remove_all(result.root, result.file_count, result.folder_count, inp, out)
        out.write("\n Temp was cleaning, put any key to close the terminal...")
        out.flush()
        inp.readline()
    elif answer in ("N", "n"):
        show_info("Cancel Operation", out)
        out.write("Push any key to close...\n")
        inp.readline()
    return result