"""
todo Errors
===========
Every fatal condition is a TodoError. The CLI prints the message to
stderr and exits with status 1; nothing is retried.
"""


class TodoError(Exception):
    """Base class for fatal todo errors."""
    pass


class InvalidArgument(TodoError):
    """Bad id token, wrong id count, or missing description."""
    pass


class InvalidId(TodoError):
    """An id outside the bounds of the loaded list."""
    pass


class StorageUnavailable(TodoError):
    """The storage file (or the home directory holding it) is unusable."""
    pass
