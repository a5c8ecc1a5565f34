"""Reference counted shared ownership of a payload.

Every :py:class:`SharedHandle` that aliases a payload shares one
:py:class:`~refhandle.refcount.RefCount` with its siblings. The counter always
equals the number of live (unreleased) handles aliasing the payload, and the
payload is passed to its deleter exactly when the counter drops from one to zero.

Example::

    with SharedHandle(open_resource()) as p:
        with SharedHandle.alias(p) as q:
            q.read()
        # The resource is still open: p holds it.
        p.read()
    # The resource was closed when p was released.

Copies share the payload rather than duplicating it::

    q = copy.copy(p)      # same as SharedHandle.alias(p)
    r = SharedHandle()    # empty
    r.assign(p)           # r now aliases p's payload too

Not thread-safe. Handles aliasing one payload must only be used from one thread.
"""

from __future__ import annotations

__all__ = ["SharedHandle"]

import functools
import logging
import typing

import typing_extensions

from refhandle._ownership import default_deleter
from refhandle._ownership import Deleter
from refhandle._ownership import OwningHandle
from refhandle.exceptions import NullReferenceError
from refhandle.exceptions import ReleasedHandleError
from refhandle.refcount import RefCount

logger = logging.getLogger(__name__)
logger.debug("Importing {}".format(__name__))

_T = typing.TypeVar("_T")


class SharedHandle(OwningHandle[_T]):
    """Shared owner of a payload.

    ``SharedHandle()`` creates an empty handle that can be assigned into later.
    ``SharedHandle(payload)`` takes ownership of *payload*, which must not be owned
    by another handle. When the last alias is released, *deleter* is called with
    the payload (by default, :py:func:`~refhandle._ownership.default_deleter`
    closes it if it has a ``close()`` method).

    Each handle must be released exactly once, with :py:meth:`release` or by
    using the handle as a context manager.
    """

    _payload: typing.Optional[_T]
    _deleter: Deleter
    _reference: typing.Optional[RefCount]

    def __init__(self, payload: typing.Optional[_T] = None, deleter: typing.Optional[Deleter] = None):
        self._payload = payload
        self._deleter = default_deleter if deleter is None else deleter
        self._reference = RefCount()
        self._reference.add_ref()
        logger.debug("Created %r.", self)

    @classmethod
    def alias(cls, other: SharedHandle[_T]) -> SharedHandle[_T]:
        """Get a new handle sharing the payload of *other*.

        Raises:
            ReleasedHandleError: if *other* has been released.
        """
        if not isinstance(other, SharedHandle):
            raise TypeError(f"Cannot alias {repr(other)}. Expected a {cls.__qualname__}.")
        other._check_active()
        handle = object.__new__(cls)
        handle._adopt(other)
        return handle

    def __copy__(self):
        return self.alias(self)

    def __deepcopy__(self, memo):
        # The payload is shared, never duplicated.
        return self.alias(self)

    def assign(self, other: SharedHandle[_T]) -> typing_extensions.Self:
        """Make this handle an alias of *other*.

        The payload previously held by this handle is freed if this was its last
        alias. Assigning a handle to itself has no effect.

        Returns:
            This handle, so that assignments can be chained.

        Raises:
            ReleasedHandleError: if either handle has been released.
        """
        if not isinstance(other, SharedHandle):
            raise TypeError(f"Cannot assign {type(other).__qualname__} to {self.__class__.__qualname__}.")
        self._check_active()
        if other is self:
            return self
        other._check_active()
        pending = self._detach()
        self._adopt(other)
        if pending is not None:
            pending()
        return self

    def get(self) -> _T:
        """Dereference the handle.

        Raises:
            NullReferenceError: if the handle is empty.
            ReleasedHandleError: if the handle has been released.
        """
        self._check_active()
        if self._payload is None:
            raise NullReferenceError(f"{repr(self)} does not hold a payload.")
        return self._payload

    def release(self):
        """Release this alias.

        The payload is freed if no other alias remains.

        Raises:
            ReleasedHandleError: if the handle has already been released.
        """
        self._check_active()
        pending = self._detach()
        if pending is not None:
            pending()

    def is_active(self) -> bool:
        return self._reference is not None

    @property
    def use_count(self) -> int:
        """Number of live handles sharing this handle's payload (0 once released)."""
        if self._reference is None:
            return 0
        return self._reference.count

    def __bool__(self):
        return self._reference is not None and self._payload is not None

    def __repr__(self):
        if self._reference is None:
            return f"<{self.__class__.__qualname__} (released)>"
        return f"<{self.__class__.__qualname__} payload={self._payload!r} count={self._reference.count}>"

    def _check_active(self):
        if self._reference is None:
            raise ReleasedHandleError(f"{self.__class__.__qualname__} {hex(id(self))} has been released.")

    def _adopt(self, other: SharedHandle[_T]):
        self._payload = other._payload
        self._deleter = other._deleter
        self._reference = other._reference
        self._reference.add_ref()
        logger.debug("Aliased %r.", self)

    def _detach(self) -> typing.Optional[typing.Callable[[], typing.Any]]:
        """Drop this alias.

        Returns:
            The pending deletion of the payload if this was the last alias, else None.
            The handle state is updated before the deletion is performed, so a
            failing deleter cannot lead to a second deletion.
        """
        remaining = self._reference.release()
        payload = self._payload
        self._reference = None
        self._payload = None
        pending = None
        if remaining == 0 and payload is not None:
            pending = functools.partial(self._deleter, payload)
        logger.debug("Released alias of %r. %d remaining.", payload, remaining)
        return pending
