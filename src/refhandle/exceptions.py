"""Exceptions thrown by refhandle are catchable as refhandle.RefHandleError.

Additional common exceptions are defined in this module.
refhandle submodules may define additional exceptions, but all will be derived
from exceptions specified in refhandle.exceptions.

All of these errors indicate misuse of the API or a bug. None of them describe
a recoverable runtime condition.
"""

import logging as _logging

logger = _logging.getLogger(__name__)
logger.debug("Importing {}".format(__name__))


class RefHandleError(Exception):
    """Base exception for refhandle package errors.

    Users should be able to use this base class to catch errors
    emitted by refhandle.
    """


class RefHandleWarning(Warning):
    """Base Warning for refhandle package warnings.

    Users and testers should be able to use this base class to filter
    warnings emitted by refhandle.
    """


class InternalError(RefHandleError):
    """An otherwise unclassifiable error has occurred (a bug)."""


class InvariantError(InternalError):
    """A reference count would have been driven below zero.

    A negative count can never return to a state that triggers release, so the
    operation is refused instead of being performed.
    """


class APIError(RefHandleError):
    """Specified interfaces are being violated."""


class NullReferenceError(APIError):
    """An empty handle was dereferenced."""


class ReleasedHandleError(APIError):
    """A handle was used after it was released."""


class ProtocolWarning(RefHandleWarning):
    """A handle was garbage collected without being released."""
