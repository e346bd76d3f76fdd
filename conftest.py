"""py.test configuration."""
import logging
import pytest


@pytest.fixture
def trampoline_log(caplog):
    """Records of the driver's logger at DEBUG level."""
    caplog.set_level(logging.DEBUG, logger="stack_safe.trampoline")
    return caplog
