"""Exception classes for linkedlists."""


class LinkedListError(Exception):
    """Base exception for all linkedlists errors."""


class InvariantError(LinkedListError):
    """Raised when a list's prev/next bookkeeping is found to be inconsistent."""
