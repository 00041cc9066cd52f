"""Pydantic models describing filesystem entries observed by a probe."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel


class EntryKind(str, Enum):
    """What a probe found at a path."""

    ABSENT = "absent"
    FILE = "file"
    DIRECTORY = "directory"
    # stat failed for a reason other than the path being missing
    INDETERMINATE = "indeterminate"


class EntryDescriptor(BaseModel):
    """Metadata read from a single stat of a path."""

    path: str
    kind: EntryKind
    mode: Optional[int] = None
    size: Optional[int] = None

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY
