"""Draft scaffolding module.

A draft lives at ``drafts/<YYYYMMDD>_<note name>/README.md`` under a root
directory. The date comes from an injectable clock and the filesystem from
an optional fsspec implementation, so callers and tests control both.
"""

import logging
from collections.abc import Callable
from datetime import date

import fsspec

from .utils import fs_join, get_fs_and_path, validate_note_name

logger = logging.getLogger(__name__)

DRAFTS_DIRNAME = "drafts"
README_FILENAME = "README.md"
DATE_FORMAT = "%Y%m%d"

Clock = Callable[[], date]


class DraftError(Exception):
    """Base class for draft scaffolding errors."""


class InvalidNoteNameError(DraftError, ValueError):
    """Raised when a note name cannot name a single draft directory."""


def today() -> date:
    """Return the current local date."""
    return date.today()  # noqa: DTZ011


def draft_dirname(note_name: str, day: date) -> str:
    """Return the draft directory name, ``<YYYYMMDD>_<note name>``.

    Raises:
        InvalidNoteNameError: If ``note_name`` is not a usable directory suffix.

    """
    try:
        validate_note_name(note_name)
    except ValueError as e:
        raise InvalidNoteNameError(str(e)) from e
    return f"{day.strftime(DATE_FORMAT)}_{note_name}"


def draft_path(
    note_name: str,
    *,
    root: str = ".",
    clock: Clock | None = None,
) -> str:
    """Compute the draft directory path for ``note_name``.

    Args:
        note_name: Caller-supplied name, used verbatim as the suffix.
        root: Directory under which ``drafts/`` lives. ``"."`` keeps the
            result relative, e.g. ``drafts/20240315_my-note``.
        clock: Returns the date to stamp. Defaults to :func:`today`.

    Returns:
        The draft directory path.

    """
    day = (clock or today)()
    return fs_join(root, DRAFTS_DIRNAME, draft_dirname(note_name, day))


def create_draft(
    path: str,
    *,
    fs: fsspec.AbstractFileSystem | None = None,
    truncate: bool = False,
) -> str:
    """Create the draft directory at ``path`` and an empty README stub.

    Missing parents are created and an existing directory is reused. An
    existing README is left untouched unless ``truncate`` is set.

    Args:
        path: Draft directory path, as returned by :func:`draft_path`.
        fs: Optional filesystem implementation. Inferred from ``path`` if omitted.
        truncate: Empty an existing README instead of preserving it.

    Returns:
        The README path on the filesystem used.

    Raises:
        OSError: If the directory or file cannot be created.

    """
    fs_obj, dir_path = get_fs_and_path(path, fs)

    fs_obj.makedirs(dir_path, exist_ok=True)
    logger.debug("Ensured draft directory %s", dir_path)

    readme_path = fs_join(dir_path, README_FILENAME)
    if truncate or not fs_obj.exists(readme_path):
        fs_obj.touch(readme_path, truncate=True)
        logger.info("Wrote empty %s", readme_path)
    else:
        logger.info("Kept existing %s", readme_path)
    return readme_path


def scaffold(
    note_name: str,
    *,
    root: str = ".",
    clock: Clock | None = None,
    fs: fsspec.AbstractFileSystem | None = None,
    truncate: bool = False,
) -> str:
    """Create ``drafts/<YYYYMMDD>_<note name>/README.md`` under ``root``.

    Returns:
        The draft directory path.

    """
    path = draft_path(note_name, root=root, clock=clock)
    logger.info("Scaffolding draft %s", path, extra={"draft": path})
    create_draft(path, fs=fs, truncate=truncate)
    return path
