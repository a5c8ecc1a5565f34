"""Configuration for pytest tests.

A custom command line option is added to the pytest configuration,
but it must be provided *after* all standard pytest options.

Note: https://docs.python.org/3/library/devmode.html#devmode may be enabled
"using the -X dev command line option or by setting the PYTHONDEVMODE environment
variable to 1."
"""
import logging

import pytest

logger = logging.getLogger("pytest_config")
logger.setLevel(logging.DEBUG)


def pytest_addoption(parser):
    """Add command-line user options for the pytest invocation."""
    parser.addoption(
        "--exhaustive", action="store_true", default=False, help="run exhaustive coverage with extra tests"
    )


def pytest_configure(config):
    config.addinivalue_line("markers", "exhaustive: mark test to run only for exhaustive testing")


def pytest_collection_modifyitems(config, items):
    skip_exhaustive = pytest.mark.skip(reason="use --exhaustive for more exhaustive testing")
    if not config.getoption("--exhaustive"):
        for item in items:
            if "exhaustive" in item.keywords:
                item.add_marker(skip_exhaustive)


class TrackedPayload:
    """Test payload that records when it is closed."""

    def __init__(self, name: str, log: list):
        self.name = name
        self.close_count = 0
        self._log = log

    @property
    def closed(self):
        return self.close_count > 0

    def close(self):
        self.close_count += 1
        self._log.append(self.name)

    def display(self):
        return f"Name = {self.name}"

    def __repr__(self):
        return f"<TrackedPayload {self.name}>"


@pytest.fixture
def deletion_log():
    """Names of TrackedPayloads, in the order in which they were closed."""
    return []


@pytest.fixture
def payload_factory(deletion_log):
    """Get a function that creates named TrackedPayloads reporting to *deletion_log*."""

    def factory(name: str) -> TrackedPayload:
        return TrackedPayload(name, deletion_log)

    return factory
