"""Data models for download sorting."""

from mediasort.models.media import MediaKind, ParsedTarget, SortTarget

__all__ = ["MediaKind", "ParsedTarget", "SortTarget"]
