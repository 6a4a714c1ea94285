"""Exceptions raised by the board engine.

All of them derive from :class:`GameError`, so collaborators can catch a single
type and show ``str(exc)`` to the user.
"""


class GameError(Exception):
    """Base error carrying a human-readable message."""


class InvalidPosition(GameError):
    """Row/column outside ``[1, N]`` or square index outside ``[0, N*N)``."""


class InvalidSize(GameError):
    """Board side length must be greater than 1."""


class EmptyHistory(GameError):
    """Undo requested with no snapshot to restore."""


class InvalidInternalState(GameError):
    """Neighbor classification reached a case that cannot happen."""
