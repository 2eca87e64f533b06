"""Pytest configuration and fixtures for all tests."""

import pytest

from flightcalc.core.logging_system import shutdown_logging
from flightcalc.weight_balance import AircraftProfile, load_profile


@pytest.fixture(scope="session", autouse=True)
def isolate_log_dir(tmp_path_factory):
    """Redirect platform log files into a temporary directory.

    This is a session-scoped fixture that runs automatically so that tests
    exercising the command-line host never write into the user's home.
    """
    log_dir = tmp_path_factory.mktemp("logs")

    with pytest.MonkeyPatch.context() as mp:
        mp.setattr("flightcalc.core.logging_system.get_platform_log_dir", lambda: log_dir)
        yield log_dir

    shutdown_logging()


@pytest.fixture
def c172_profile() -> AircraftProfile:
    """Packaged Cessna 172S weight and balance profile."""
    return load_profile("cessna172s")
