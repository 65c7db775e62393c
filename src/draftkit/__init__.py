"""draftkit - dated draft folders for a Markdown blog."""

from .drafts import (
    DATE_FORMAT,
    DRAFTS_DIRNAME,
    README_FILENAME,
    DraftError,
    InvalidNoteNameError,
    create_draft,
    draft_dirname,
    draft_path,
    scaffold,
    today,
)

__all__ = [
    "DATE_FORMAT",
    "DRAFTS_DIRNAME",
    "README_FILENAME",
    "DraftError",
    "InvalidNoteNameError",
    "create_draft",
    "draft_dirname",
    "draft_path",
    "scaffold",
    "today",
]
