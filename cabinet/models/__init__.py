"""Data models for filesystem entries."""

from .entry_models import EntryDescriptor, EntryKind

__all__ = ["EntryDescriptor", "EntryKind"]
