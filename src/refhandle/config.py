"""Package configuration.

The active :py:class:`Configuration` is held in a :py:class:`contextvars.ContextVar`
so that a modified configuration can be applied to a limited scope with
:py:func:`scoped_configuration`. Outside of such a scope, the default configuration
is built from the environment the first time it is requested.

Environment variables:
    REFHANDLE_LEAK_POLICY: initial value of :py:attr:`Configuration.leak_policy`.
"""

from __future__ import annotations

__all__ = (
    "configuration",
    "scoped_configuration",
    "Configuration",
    "LEAK_POLICIES",
)

import contextlib
import contextvars
import dataclasses
import logging
import os
import typing

from refhandle.exceptions import APIError

logger = logging.getLogger(__name__)
logger.debug("Importing {}".format(__name__))

LEAK_POLICIES = ("warn", "log", "ignore")
"""Recognized values for :py:attr:`Configuration.leak_policy`."""

_leak_policy_variable = "REFHANDLE_LEAK_POLICY"


@dataclasses.dataclass(frozen=True)
class Configuration:
    """Module configuration information.

    See also:
        * :py:func:`refhandle.config.configuration()`
        * :py:func:`refhandle.config.scoped_configuration()`
    """

    leak_policy: str = "warn"
    """How to report a handle that is garbage collected without being released.

    ``"warn"`` issues a :py:class:`~refhandle.exceptions.ProtocolWarning`,
    ``"log"`` logs a message at WARNING level, and ``"ignore"`` does nothing.
    In every case, the handle is then released.
    """

    def __post_init__(self):
        if self.leak_policy not in LEAK_POLICIES:
            raise APIError(f"leak_policy must be one of {LEAK_POLICIES}. Got {repr(self.leak_policy)}.")


_configuration: contextvars.ContextVar[typing.Optional[Configuration]] = contextvars.ContextVar(
    "_configuration", default=None
)


def _from_environment() -> Configuration:
    kwargs = {}
    leak_policy = os.getenv(_leak_policy_variable)
    if leak_policy:
        kwargs["leak_policy"] = leak_policy.strip().lower()
    config = Configuration(**kwargs)
    logger.debug(f"Initialized {config} from environment.")
    return config


def configuration() -> Configuration:
    """Get the active package configuration."""
    config = _configuration.get()
    if config is None:
        config = _from_environment()
        _configuration.set(config)
    return config


@contextlib.contextmanager
def scoped_configuration(**changes) -> typing.Iterator[Configuration]:
    """Apply a modified configuration for the duration of a ``with`` block.

    Keyword arguments name :py:class:`Configuration` fields to replace.

    Example::

        with scoped_configuration(leak_policy="ignore"):
            ...

    Raises:
        APIError: if a keyword is not a Configuration field or a value is invalid.
    """
    try:
        config = dataclasses.replace(configuration(), **changes)
    except TypeError as e:
        raise APIError(f"Invalid configuration fields: {', '.join(changes)}") from e
    token = _configuration.set(config)
    logger.debug(f"Activated {config}.")
    try:
        yield config
    finally:
        _configuration.reset(token)
