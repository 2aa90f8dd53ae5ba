"""Persistence helpers that translate database failures into store errors."""

from .errors import DuplicateRecord, RecordNotFound, StoreError

__all__ = ["DuplicateRecord", "RecordNotFound", "StoreError"]
