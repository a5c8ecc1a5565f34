"""Shared reference counter for handles that alias one payload.

Not thread-safe. Counters are only ever mutated through :py:meth:`RefCount.add_ref`
and :py:meth:`RefCount.release`, and no synchronization is performed.
"""

__all__ = ["RefCount"]

import logging

from refhandle.exceptions import InvariantError

logger = logging.getLogger(__name__)
logger.debug("Importing {}".format(__name__))


class RefCount:
    """Track the number of live handles aliasing one payload.

    A new RefCount starts at zero. The owner that creates it is expected to call
    :py:meth:`add_ref` immediately.
    """

    __slots__ = ("_count",)

    def __init__(self):
        self._count = 0

    @property
    def count(self) -> int:
        """Current number of live aliases."""
        return self._count

    def add_ref(self):
        """Record one more alias."""
        self._count += 1

    def release(self) -> int:
        """Record the loss of one alias.

        Returns:
            The remaining number of aliases. Zero means the caller held the last one
            and is responsible for releasing the payload.

        Raises:
            InvariantError: if there are no aliases left to release.
        """
        if self._count <= 0:
            raise InvariantError(f"Cannot release {self!r}: no references remain.")
        self._count -= 1
        return self._count

    def __repr__(self):
        return f"<{self.__class__.__qualname__} count={self._count}>"
