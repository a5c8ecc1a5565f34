"""Sole ownership of a payload.

A :py:class:`ScopedHandle` frees its payload when it is released. Because there is
no reference count, two copies of a scoped handle would both try to free the same
payload, and the first release would leave the other one dangling. Copying is
therefore refused. Convert to a :py:class:`~refhandle.handle.SharedHandle` with
:py:meth:`ScopedHandle.share` when shared ownership is needed.
"""

from __future__ import annotations

__all__ = ["ScopedHandle"]

import logging
import typing

from refhandle._ownership import default_deleter
from refhandle._ownership import Deleter
from refhandle._ownership import OwningHandle
from refhandle.exceptions import APIError
from refhandle.exceptions import NullReferenceError
from refhandle.exceptions import ReleasedHandleError
from refhandle.handle import SharedHandle

logger = logging.getLogger(__name__)
logger.debug("Importing {}".format(__name__))

_T = typing.TypeVar("_T")


class ScopedHandle(OwningHandle[_T]):
    """Sole owner of a payload.

    Takes ownership of *payload*. The caller is responsible for calling
    :py:meth:`release` exactly once (or for using the handle as a context manager),
    at which point *deleter* is called with the payload.
    """

    def __init__(self, payload: _T, deleter: typing.Optional[Deleter] = None):
        if payload is None:
            raise NullReferenceError(f"{self.__class__.__qualname__} requires a payload.")
        self._payload = payload
        self._deleter = default_deleter if deleter is None else deleter
        self._active = True

    def __copy__(self):
        raise APIError(f"{self.__class__.__qualname__} has a single owner and cannot be copied. Use share().")

    def __deepcopy__(self, memo):
        raise APIError(f"{self.__class__.__qualname__} has a single owner and cannot be copied. Use share().")

    def get(self) -> _T:
        self._check_active()
        return self._payload

    def release(self):
        """Free the payload.

        Raises:
            ReleasedHandleError: if the handle has already been released or detached.
        """
        payload = self.detach()
        logger.debug("Releasing %r.", payload)
        self._deleter(payload)

    def detach(self) -> _T:
        """Give up ownership without freeing the payload.

        Returns:
            The payload, which is now the caller's responsibility.
        """
        self._check_active()
        payload = self._payload
        self._payload = None
        self._active = False
        return payload

    def share(self) -> SharedHandle[_T]:
        """Transfer ownership to a new SharedHandle.

        This handle is detached. The new handle is the only alias of the payload.
        """
        deleter = self._deleter
        return SharedHandle(self.detach(), deleter=deleter)

    def is_active(self) -> bool:
        return self._active

    def __bool__(self):
        return self._active

    def __repr__(self):
        if not self._active:
            return f"<{self.__class__.__qualname__} (released)>"
        return f"<{self.__class__.__qualname__} payload={self._payload!r}>"

    def _check_active(self):
        if not self._active:
            raise ReleasedHandleError(f"{self.__class__.__qualname__} {hex(id(self))} has been released.")
