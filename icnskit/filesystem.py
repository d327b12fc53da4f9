"""Filesystem helpers used when reading and writing .iconset directories."""

from __future__ import annotations

import os
import stat
from dataclasses import dataclass
from enum import Enum, auto

from .core import ErrorCode, IcnsError

PathLike = str | bytes | os.PathLike

_DIR_MODE = 0o755


class FileType(Enum):
    """Kind of filesystem object found at a path."""

    NOTEXIST = auto()
    UNKNOWN = auto()
    REG = auto()
    DIR = auto()
    OTHER = auto()


@dataclass(frozen=True)
class DirEntry:
    """One entry of a directory listing."""

    name: str
    type: FileType


def _fs_error(action: str, exc: OSError) -> IcnsError:
    reason = exc.strerror or str(exc)
    return IcnsError(ErrorCode.FILESYSTEM_ERROR, f"{action} failed: {reason}")


def get_file_type(path: PathLike) -> FileType:
    """Return the type of the object at ``path``, following symbolic links."""
    try:
        mode = os.stat(path).st_mode
    except (OSError, ValueError):
        return FileType.NOTEXIST
    if stat.S_ISREG(mode):
        return FileType.REG
    if stat.S_ISDIR(mode):
        return FileType.DIR
    return FileType.OTHER


def chdir(path: PathLike) -> None:
    """Change the current working directory."""
    try:
        os.chdir(path)
    except OSError as exc:
        raise _fs_error("chdir", exc) from exc


def getcwd() -> str:
    """Return the current working directory."""
    try:
        return os.getcwd()
    except OSError as exc:
        raise _fs_error("getcwd", exc) from exc


def mkdir(path: PathLike) -> None:
    """Create a new directory at ``path``; it must not already exist."""
    try:
        os.mkdir(path, _DIR_MODE)
    except OSError as exc:
        raise _fs_error("mkdir", exc) from exc


def unlink(path: PathLike) -> None:
    """Delete the non-directory file at ``path``."""
    try:
        os.unlink(path)
    except OSError as exc:
        raise _fs_error("unlink", exc) from exc


def _entry_type(entry: os.DirEntry) -> FileType:
    try:
        if entry.is_symlink():
            return FileType.OTHER
        if entry.is_file(follow_symlinks=False):
            return FileType.REG
        if entry.is_dir(follow_symlinks=False):
            return FileType.DIR
    except OSError:
        return FileType.UNKNOWN
    return FileType.OTHER


def read_directory(path: PathLike) -> list[DirEntry]:
    """List the entries of the directory at ``path``, excluding ``.`` and ``..``."""
    try:
        with os.scandir(path) as entries:
            return [
                DirEntry(os.fsdecode(entry.name), _entry_type(entry))
                for entry in entries
                if os.fsdecode(entry.name) not in ("", ".", "..")
            ]
    except OSError as exc:
        raise IcnsError(
            ErrorCode.FILESYSTEM_ERROR,
            f"failed to open dir '{os.fsdecode(path)}': {exc.strerror or exc}",
        ) from exc