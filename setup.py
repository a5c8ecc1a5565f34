import sys

from setuptools import setup

# If the Python version is too low, developers will get a strange error when the
# package is imported, since refhandle uses `from __future__ import annotations`
# and recently-introduced typing features.
_supported = True
if sys.version_info.major < 3:
    _supported = False
if sys.version_info.major == 3 and sys.version_info.minor < 8:
    _supported = False
if not _supported:
    raise RuntimeError('refhandle requires Python 3.8 or higher.')

# PEP-517 package details are in pyproject.toml, but we keep this file for non-PEP-517 capable
# installations, including "editable" installations with `setup.py develop`
setup()
