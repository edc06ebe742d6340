from __future__ import annotations

from enum import Enum


class Outcome(Enum):
    """Successful end state of a publish or prune run."""

    WRITTEN = "written"
    DELETED = "deleted"
    ABORTED = "aborted"  # user declined; nothing changed
    UNCHANGED = "unchanged"  # nothing selected, no prompt shown
