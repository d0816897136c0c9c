"""Exceptions raised by the persistence layer."""


class PersistenceError(Exception):
    """Storage unavailable or a statement failed."""


class ConstraintViolationError(PersistenceError):
    """A unique or foreign key constraint rejected the write."""
