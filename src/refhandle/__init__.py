"""refhandle - reference counted handles with deterministic release.

This package provides pointer-like handles that own a payload and free it at a
well-defined moment instead of whenever the garbage collector gets to it.

* :py:class:`SharedHandle` shares one payload among any number of aliases and
  frees it when the last alias is released.
* :py:class:`ScopedHandle` is the sole owner of a payload and frees it when it is
  released. It cannot be copied.
* :py:class:`RefCount` is the counter shared by the aliases of one payload.

Handles are released with ``release()`` or by leaving a ``with`` block::

    with SharedHandle(resource) as handle:
        other = SharedHandle.alias(handle)
        ...
        other.release()
    # resource.close() has been called.

Freeing a payload means calling its *deleter*. By default, the payload's
``close()`` method is called if it has one.

Handles are not thread-safe.
"""

from __future__ import annotations

# Note: Even though `from refhandle import *` is generally discouraged, the __all__ module attribute is useful
# to document the intended public interface.
__all__ = (
    # core API
    "SharedHandle",
    "ScopedHandle",
    "RefCount",
    # configuration
    "configuration",
    "scoped_configuration",
    # errors
    "RefHandleError",
    "__version__",
)

from ._version import __version__
from .config import configuration
from .config import scoped_configuration
from .exceptions import RefHandleError
from .handle import SharedHandle
from .logger import logger
from .refcount import RefCount
from .scoped import ScopedHandle

logger.debug("Imported {}".format(__name__))
