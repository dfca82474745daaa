"""A filesystem path with queries and helpers for reading its contents."""

from __future__ import annotations

import os
import stat
from pathlib import Path
from typing import IO, List, Union

from .result import Result

PathLike = Union[str, "os.PathLike[str]", "File"]


class FileError(OSError):
    """Raised when a filesystem operation on a File fails."""


def _to_path(value: PathLike) -> Path:
    if isinstance(value, File):
        return value.path
    if isinstance(value, (str, os.PathLike)):
        return Path(value)
    raise TypeError(f"expected a path, got {type(value).__name__}")


class File:
    """A path on disk; it need not exist."""

    __slots__ = ("_path",)

    def __init__(self, path: PathLike) -> None:
        self._path = _to_path(path)

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._path.exists()

    def is_directory(self) -> bool:
        return self._path.is_dir()

    def is_regular_file(self) -> bool:
        return self._path.is_file()

    def _has_owner_permission(self, bit: int) -> bool:
        try:
            mode = self._path.stat().st_mode
        except FileNotFoundError:
            # Permissions of a missing path are unknown, which reads as all bits set.
            return True
        except OSError as error:
            raise FileError(f"cannot query status of {self._path}: {error}") from error
        return bool(mode & bit)

    def can_read(self) -> bool:
        return self._has_owner_permission(stat.S_IRUSR)

    def can_write(self) -> bool:
        return self._has_owner_permission(stat.S_IWUSR)

    def can_execute(self) -> bool:
        return self._has_owner_permission(stat.S_IXUSR)

    def absolute_path(self) -> Path:
        return Path(os.path.abspath(self._path))

    def parent_path(self) -> Path:
        return self._path.parent

    def relative_path(self, other: PathLike) -> Path:
        """This path expressed relative to other."""
        base = os.path.realpath(_to_path(other))
        return Path(os.path.relpath(os.path.realpath(self._path), base))

    def filename(self) -> str:
        return self._path.name

    def stem(self) -> str:
        return self._path.stem

    def extension(self) -> str:
        return self._path.suffix

    def can_read_from_file(self) -> bool:
        """Whether the path exists, is a regular file and is owner-readable."""
        return self.exists() and self.is_regular_file() and self.can_read()

    def _check_readable(self) -> Union[str, None]:
        if not self.exists():
            return "File does not exist"
        if not self.is_regular_file():
            return "File is not a regular file"
        if not self.can_read():
            return "File cannot be read"
        return None

    def read_text(self, checking: bool = True) -> Result[str, str]:
        """The whole file as text, or an error message."""
        if checking:
            problem = self._check_readable()
            if problem is not None:
                return Result.err(problem)
        try:
            with open(self._path, encoding="utf-8", newline="") as stream:
                return Result.ok(stream.read())
        except OSError:
            return Result.err("Failed to open file")

    def read_binary(self, checking: bool = True) -> Result[bytes, str]:
        """The whole file as bytes, or an error message."""
        if checking:
            problem = self._check_readable()
            if problem is not None:
                return Result.err(problem)
        try:
            return Result.ok(self._path.read_bytes())
        except OSError:
            return Result.err("Failed to open file")

    def open(self, mode: str = "w") -> IO:
        """Open the file for writing with the given mode."""
        try:
            return open(self._path, mode)
        except OSError as error:
            raise FileError(f"cannot open {self._path}: {error}") from error

    def list_files(self) -> List["File"]:
        """The entries of this directory, sorted by name."""
        try:
            entries = sorted(os.scandir(self._path), key=lambda entry: entry.name)
        except OSError as error:
            raise FileError(f"cannot list {self._path}: {error}") from error
        return [File(self._path / entry.name) for entry in entries]

    def __truediv__(self, other: PathLike) -> "File":
        return File(self._path / _to_path(other))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, File):
            return NotImplemented
        return self._path == other._path

    def __hash__(self) -> int:
        return hash(self._path)

    def __fspath__(self) -> str:
        return os.fspath(self._path)

    def __repr__(self) -> str:
        return f"File({str(self._path)!r})"