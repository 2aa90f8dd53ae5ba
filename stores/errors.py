"""Errors raised by the store modules."""


class StoreError(Exception):
    """Base class for translated storage failures."""


class RecordNotFound(StoreError):
    """No record matched the lookup or the write."""


class DuplicateRecord(StoreError):
    """An insert violated a uniqueness constraint."""
