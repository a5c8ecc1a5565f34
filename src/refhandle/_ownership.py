"""Payload release and the behavior shared by all owning handles.

A handle "frees" its payload by passing it to a *deleter*. Handles are released
explicitly with ``release()`` or by leaving a ``with`` block. A handle that is
garbage collected before it was released reports the leak according to the
configured leak policy (see :py:mod:`refhandle.config`) and then releases itself,
so that the payload is still freed exactly once.
"""

from __future__ import annotations

__all__ = ["Deleter", "default_deleter", "report_leak", "OwningHandle"]

import abc
import logging
import typing
import warnings

from refhandle.config import configuration
from refhandle.exceptions import ProtocolWarning

logger = logging.getLogger(__name__)
logger.debug("Importing {}".format(__name__))

_T = typing.TypeVar("_T")

Deleter = typing.Callable[[_T], typing.Any]
"""Callable that frees a payload. Called at most once per payload."""


def default_deleter(payload):
    """Release *payload* if it is a handle, else close it if it has a ``close()`` method.

    Objects without a ``close()`` method need no release step beyond dropping the
    last reference held by a handle.
    """
    if isinstance(payload, OwningHandle):
        # Attribute lookups on a handle reach its own payload, so the nested
        # handle must be released rather than closed through.
        logger.debug("Releasing nested %r.", payload)
        payload.release()
        return
    close = getattr(payload, "close", None)
    if callable(close):
        logger.debug("Closing %r.", payload)
        close()
    else:
        logger.debug("Dropping %r.", payload)


def report_leak(handle: OwningHandle):
    """Apply the configured leak policy to a handle that is being finalized unreleased."""
    policy = configuration().leak_policy
    message = f"{handle.__class__.__qualname__} {hex(id(handle))} was not explicitly released!"
    if policy == "warn":
        warnings.warn(message, ProtocolWarning)
    elif policy == "log":
        logger.warning(message)


class OwningHandle(abc.ABC, typing.Generic[_T]):
    """Pointer-like access to a payload with scoped release.

    Attribute lookups that the handle does not define itself are forwarded to the
    payload, so ``handle.display()`` is equivalent to ``handle.get().display()``.
    Names with a leading underscore are never forwarded. Note that payload
    attributes that share a name with a handle method (``get``, ``release``, ...)
    must be reached through :py:meth:`get`.
    """

    @abc.abstractmethod
    def is_active(self) -> bool:
        """Whether the handle has not been released yet."""
        ...

    @abc.abstractmethod
    def get(self) -> _T:
        """Get the payload."""
        ...

    @abc.abstractmethod
    def release(self):
        """Give up this handle's ownership, freeing the payload if appropriate."""
        ...

    def __getattr__(self, name):
        if name.startswith("_"):
            raise AttributeError(name)
        return getattr(self.get(), name)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self.is_active():
            self.release()
        else:
            warnings.warn(f"{self!r} was already released before leaving its context.", ProtocolWarning)
        # Do not suppress exceptions from the `with` block.
        return False

    def __del__(self):
        try:
            active = self.is_active()
        except AttributeError:
            # Construction did not complete.
            return
        if active:
            try:
                report_leak(self)
            finally:
                self.release()
