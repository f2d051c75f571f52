"""Pytest configuration and fixtures for all tests."""

import pytest

from airline.core.logging_system import initialize_logging, shutdown_logging
from airline.fleet import AircraftVariant, CargoAircraft, Fleet, PassengerPlane


@pytest.fixture(scope="session", autouse=True)
def test_logging(tmp_path_factory):
    """Send log output of the whole session to a temporary directory.

    Keeps test runs from writing into the platform log directory.
    """
    log_dir = tmp_path_factory.mktemp("logs")
    config_file = log_dir / "logging.yaml"
    config_file.write_text(
        f"level: DEBUG\nlog_dir: {log_dir.as_posix()}\nconsole:\n  enabled: false\n",
        encoding="utf-8",
    )

    initialize_logging(config_file, use_platform_dir=False)

    yield log_dir

    shutdown_logging()


@pytest.fixture
def cargo_747() -> CargoAircraft:
    """Boeing 747 freighter carrying 50 t."""
    return CargoAircraft(AircraftVariant.BOEING_747, "C1", 50000.0)


@pytest.fixture
def passenger_737() -> PassengerPlane:
    """Boeing 737 with 120 passengers."""
    return PassengerPlane(AircraftVariant.BOEING_737, "P1", 120)


@pytest.fixture
def mixed_fleet(cargo_747, passenger_737) -> Fleet:
    """Fleet with one cargo and one passenger plane, cargo first."""
    fleet = Fleet()
    fleet.add(cargo_747)
    fleet.add(passenger_737)
    return fleet


@pytest.fixture
def large_fleet() -> Fleet:
    """Fleet covering every variant and both kinds, unsorted."""
    fleet = Fleet()
    fleet.add(PassengerPlane(AircraftVariant.AIRBUS_A320, "RA-73001", 150))
    fleet.add(CargoAircraft(AircraftVariant.AIRBUS_A310, "RA-82010", 12500.5))
    fleet.add(PassengerPlane(AircraftVariant.BOEING_747, "RA-74701", 410))
    fleet.add(CargoAircraft(AircraftVariant.BOEING_737, "RA-73702", 0.0))
    fleet.add(PassengerPlane(AircraftVariant.AIRBUS_A310, "RA-31003", 0))
    fleet.add(CargoAircraft(AircraftVariant.BOEING_747, "RA-74704", 112000.0))
    return fleet


@pytest.fixture
def restore_test_logging(test_logging):
    """Re-initialize the session log setup after a test replaced or shut it down."""
    yield
    shutdown_logging()
    initialize_logging(test_logging / "logging.yaml", use_platform_dir=False)
