"""Utility functions for draftkit."""

from __future__ import annotations

import fsspec
from fsspec.core import url_to_fs

_SEPARATORS = ("/", "\\")
_RESERVED_NAMES = {".", ".."}


def validate_note_name(note_name: str) -> str:
    """Validate that a note name can be used as a single directory suffix.

    The name is otherwise used verbatim: spaces, unicode and punctuation are
    accepted and left for the filesystem to judge.

    Args:
        note_name: The caller-supplied note name.

    Returns:
        The validated note name.

    Raises:
        ValueError: If the name is empty, reserved, or contains a path
                    separator.

    """
    if not note_name or note_name in _RESERVED_NAMES:
        msg = f"Invalid note name: {note_name!r}"
        raise ValueError(msg)
    if any(sep in note_name for sep in _SEPARATORS):
        msg = f"Invalid note name: {note_name!r}. Must not contain path separators."
        raise ValueError(msg)
    return note_name


def fs_join(base: str, *parts: str) -> str:
    """Join path segments with ``/`` as fsspec expects.

    A ``base`` of ``""`` or ``"."`` yields a relative path made of ``parts``.
    """
    segments = [part.strip("/") for part in parts]
    if base in {"", "."}:
        return "/".join(segments)
    head = base.rstrip("/")
    if not head:
        return "/" + "/".join(segments)
    return "/".join([head, *segments])


def get_fs_and_path(
    path: str,
    fs: fsspec.AbstractFileSystem | None = None,
) -> tuple[fsspec.AbstractFileSystem, str]:
    """Return a filesystem and the path to use with it.

    When ``fs`` is given the path is used as-is. Otherwise URLs such as
    ``memory://`` map to their backend and plain paths map to the local
    filesystem unchanged, since ``::`` is a legal character pair in a note
    name and not a protocol chain.
    """
    if fs is not None:
        return fs, path
    if "://" in path:
        return url_to_fs(path)
    return fsspec.filesystem("file"), path
