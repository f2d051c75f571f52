"""Tests for the Fleet collection."""

import itertools

import pytest

from airline.fleet import (
    AircraftVariant,
    CargoAircraft,
    Fleet,
    InvalidPlaneError,
    PassengerPlane,
)


class TestAdd:
    """Test admission of planes."""

    def test_add_keeps_insertion_order(self, cargo_747, passenger_737) -> None:
        """Test planes are kept in the order they were added."""
        fleet = Fleet()
        fleet.add(cargo_747)
        fleet.add(passenger_737)

        assert len(fleet) == 2
        assert fleet.planes() == (cargo_747, passenger_737)

    def test_rejects_none(self) -> None:
        """Test a missing plane is rejected."""
        fleet = Fleet()
        with pytest.raises(InvalidPlaneError):
            fleet.add(None)
        assert len(fleet) == 0

    def test_rejects_unspecified_variant(self, mixed_fleet: Fleet) -> None:
        """Test a plane without variant is rejected and the fleet is unchanged."""
        with pytest.raises(InvalidPlaneError, match="no aircraft variant"):
            mixed_fleet.add(PassengerPlane(AircraftVariant.UNSPECIFIED, "P9", 10))
        assert len(mixed_fleet) == 2

    @pytest.mark.parametrize("number", ["", None])
    def test_rejects_empty_number(self, mixed_fleet: Fleet, number) -> None:
        """Test a plane without number is rejected and the fleet is unchanged."""
        with pytest.raises(InvalidPlaneError, match="number is empty"):
            mixed_fleet.add(CargoAircraft(AircraftVariant.BOEING_737, number, 10.0))
        assert len(mixed_fleet) == 2

    def test_invalid_plane_is_value_error(self) -> None:
        """Test admission failures can be caught as ValueError."""
        with pytest.raises(ValueError):
            Fleet().add(PassengerPlane(AircraftVariant.UNSPECIFIED, "P1", 1))

    @pytest.mark.parametrize("number", ["X\x01", "P\n1", "C\x00"])
    def test_rejects_control_characters_in_number(self, number: str) -> None:
        """Test numbers with control characters are rejected."""
        fleet = Fleet()
        with pytest.raises(InvalidPlaneError, match="control characters"):
            fleet.add(PassengerPlane(AircraftVariant.AIRBUS_A320, number, 1))
        assert len(fleet) == 0

    def test_accepts_spaces_and_markup_in_number(self) -> None:
        """Test printable numbers are admitted as they are."""
        fleet = Fleet()
        fleet.add(PassengerPlane(AircraftVariant.AIRBUS_A320, 'RA 73001 <"A&B">', 1))
        assert len(fleet) == 1

    @pytest.mark.parametrize("weight", [float("inf"), float("-inf"), float("nan")])
    def test_rejects_non_finite_payload(self, weight: float) -> None:
        """Test infinite or NaN cargo weights are rejected."""
        fleet = Fleet()
        with pytest.raises(InvalidPlaneError, match="non-finite"):
            fleet.add(CargoAircraft(AircraftVariant.BOEING_747, "C1", weight))
        assert len(fleet) == 0


class TestWeights:
    """Test aggregate weights."""

    def test_empty_fleet_total_is_zero(self) -> None:
        """Test an empty fleet weighs nothing."""
        assert Fleet().total_weight == 0.0

    def test_single_passenger_plane_total(self) -> None:
        """Test the total of a one-plane fleet."""
        fleet = Fleet()
        fleet.add(PassengerPlane(AircraftVariant.AIRBUS_A320, "X1", 150))
        assert fleet.total_weight == pytest.approx(46050.0)

    def test_mixed_fleet_total(self, mixed_fleet: Fleet) -> None:
        """Test 236000 + 33840."""
        assert mixed_fleet.total_weight == pytest.approx(269840.0)

    def test_average_weight(self, mixed_fleet: Fleet) -> None:
        """Test the mean takeoff weight."""
        assert mixed_fleet.average_weight == pytest.approx(134920.0)

    def test_empty_fleet_average_is_zero(self) -> None:
        """Test the average of an empty fleet."""
        assert Fleet().average_weight == 0.0

    def test_takeoff_never_below_empty_weight(self, large_fleet: Fleet) -> None:
        """Test takeoff weight is at least empty weight for non-negative payloads."""
        for plane in large_fleet:
            assert plane.takeoff_weight >= plane.empty_weight


class TestSort:
    """Test sorting by takeoff weight."""

    def test_scenario_order(self, mixed_fleet: Fleet) -> None:
        """Test the 737 comes before the 747 freighter."""
        mixed_fleet.sort_by_weight()
        assert [plane.number for plane in mixed_fleet.planes()] == ["P1", "C1"]

    def test_sorted_weights_non_decreasing(self, large_fleet: Fleet) -> None:
        """Test sorting yields non-decreasing takeoff weights."""
        large_fleet.sort_by_weight()
        weights = [plane.takeoff_weight for plane in large_fleet.planes()]
        assert all(a <= b for a, b in itertools.pairwise(weights))
        assert len(weights) == 6

    def test_sort_keeps_equal_weights_in_order(self) -> None:
        """Test ties keep their relative order."""
        fleet = Fleet()
        fleet.add(CargoAircraft(AircraftVariant.BOEING_737, "B", 0.0))
        fleet.add(CargoAircraft(AircraftVariant.BOEING_737, "A", 0.0))
        fleet.add(PassengerPlane(AircraftVariant.BOEING_737, "C", 0))

        fleet.sort_by_weight()

        assert [plane.number for plane in fleet] == ["B", "A", "C"]

    def test_sort_empty_fleet(self) -> None:
        """Test sorting an empty fleet is harmless."""
        fleet = Fleet()
        fleet.sort_by_weight()
        assert len(fleet) == 0


class TestPlanesView:
    """Test access to the contained planes."""

    def test_planes_is_snapshot(self, mixed_fleet: Fleet, passenger_737) -> None:
        """Test the returned sequence does not follow later changes."""
        snapshot = mixed_fleet.planes()
        mixed_fleet.add(PassengerPlane(AircraftVariant.AIRBUS_A310, "P2", 5))
        mixed_fleet.sort_by_weight()

        assert len(snapshot) == 2
        assert snapshot[1] is passenger_737

    def test_planes_is_immutable(self, mixed_fleet: Fleet) -> None:
        """Test the snapshot cannot be used to modify the fleet."""
        assert isinstance(mixed_fleet.planes(), tuple)

    def test_iteration(self, mixed_fleet: Fleet) -> None:
        """Test iterating yields planes in current order."""
        assert [plane.number for plane in mixed_fleet] == ["C1", "P1"]


class TestTrustedConstruction:
    """Test building fleets from decoded data."""

    def test_from_trusted_skips_checks(self) -> None:
        """Test from_trusted accepts planes add() would refuse."""
        invalid = PassengerPlane(AircraftVariant.UNSPECIFIED, "", 0)
        fleet = Fleet.from_trusted([invalid])
        assert fleet.planes() == (invalid,)

    def test_validate_reports_invalid_plane(self) -> None:
        """Test validate() applies the admission rules afterwards."""
        fleet = Fleet.from_trusted(
            [
                PassengerPlane(AircraftVariant.BOEING_737, "P1", 1),
                CargoAircraft(AircraftVariant.BOEING_737, "", 1.0),
            ]
        )
        with pytest.raises(InvalidPlaneError):
            fleet.validate()

    def test_validate_accepts_valid_fleet(self, mixed_fleet: Fleet) -> None:
        """Test validate() passes on planes admitted through add()."""
        mixed_fleet.validate()
