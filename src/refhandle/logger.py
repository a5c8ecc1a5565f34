"""Python logging facilities use the built-in logging module.

Upon import, the refhandle package sets a placeholder "NullHandler" to block
propagation of log messages to the `handler of last resort
<https://docs.python.org/3/howto/logging.html#what-happens-if-no-configuration-is-provided>`__
(and to `sys.stderr`).

If you want to see logging output on `sys.stderr`, attach a
`logging.StreamHandler` to the 'refhandle' logger.

Example::

    character_stream = logging.StreamHandler()
    # Optional: Set log level.
    logging.getLogger('refhandle').setLevel(logging.DEBUG)
    character_stream.setLevel(logging.DEBUG)
    # Optional: create formatter and add to character stream handler
    formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    character_stream.setFormatter(formatter)
    # add handler to logger
    logging.getLogger('refhandle').addHandler(character_stream)

Reference count transitions and payload deletions are logged at DEBUG level by
the submodule loggers (e.g. ``logging.getLogger('refhandle.handle')``).
Handles that are garbage collected without being released are reported at
WARNING level when the "log" leak policy is active.
See :py:mod:`refhandle.config`.
"""

__all__ = ["logger"]

# Import system facilities
from logging import DEBUG
from logging import getLogger
from logging import NullHandler

# Define `logger` attribute that is used by submodules to create sub-loggers.
logger = getLogger("refhandle")
# By default, prevent refhandle logs from propagating to the root logger (and to sys.stderr)
# if the user does not take action to handle logging.
logger.addHandler(NullHandler(level=DEBUG))
