"""Collection of fixtures for facilitation test implementations
"""
import logging

import pytest

from throwif import (
    ArgumentError,
    guard,
    unregister_guard,
)

lgr = logging.getLogger('throwif.tests.fixtures')


@pytest.fixture(autouse=True, scope="session")
def reduce_logging():
    """Reduce the logging output during test runs

    Attaching guards and changing the configuration emits DEBUG messages
    that only clutter the test output. This fixture raises the level of
    the package logger for the duration of the test session.
    """
    tilgr = logging.getLogger('throwif')
    # leave a trace that this is happening
    lgr.debug("Test fixture starts suppressing DEBUG messages")
    prev_level = tilgr.level
    tilgr.setLevel(logging.INFO)
    yield
    tilgr.setLevel(prev_level)


@pytest.fixture(autouse=False, scope="function")
def guard_cfg(monkeypatch):
    """Provide a pristine, isolated configuration manager

    Any ``THROWIF_*`` variables are removed from the environment, and a
    new manager is put in place of the process-wide one at
    ``throwif.config.manager`` for the duration of a test.

    The manager instance is yielded by the fixture.
    """
    import os
    import throwif.config as ticfg

    for k in list(os.environ):
        if k.startswith('THROWIF_'):
            monkeypatch.delenv(k)
    mngr = ticfg.build_manager()
    monkeypatch.setattr(ticfg, 'manager', mngr)
    yield mngr


@pytest.fixture(autouse=False, scope="function")
def custom_guard():
    """Attach a third-party style guard ``is_100`` for the duration of a test

    The guard function is yielded by the fixture.
    """
    def is_100(builder, argument, message=None, argument_name=None):
        if argument != 100:
            return argument
        raise ArgumentError('Cannot be 100', argument_name, argument)

    guard(is_100)
    yield is_100
    unregister_guard('is_100')
