"""Tests for plane entities and takeoff weight computation."""

import pytest

from airline.fleet.exceptions import InvalidPlaneError, UnresolvedVariantError
from airline.fleet.plane import (
    PASSENGER_MASS_KG,
    CargoAircraft,
    PassengerPlane,
    Plane,
    PlaneKind,
    create_plane,
)
from airline.fleet.variants import AircraftVariant


class TestPassengerPlane:
    """Test PassengerPlane."""

    def test_takeoff_weight(self) -> None:
        """Test 62 kg per passenger plus empty weight."""
        plane = PassengerPlane(AircraftVariant.AIRBUS_A320, "X1", 150)

        assert plane.takeoff_weight == pytest.approx(62 * 150 + 36750)
        assert plane.takeoff_weight == pytest.approx(46050.0)

    def test_scenario_boeing_737(self, passenger_737: PassengerPlane) -> None:
        """Test 120 passengers on a 737."""
        assert passenger_737.takeoff_weight == pytest.approx(33840.0)

    def test_zero_passengers_equals_empty_weight(self) -> None:
        """Test an empty cabin weighs the empty weight."""
        plane = PassengerPlane(AircraftVariant.BOEING_747, "P0", 0)
        assert plane.takeoff_weight == plane.empty_weight

    def test_passenger_mass_constant(self) -> None:
        """Test the per-passenger mass."""
        assert PASSENGER_MASS_KG == 62.0

    def test_kind_and_payload(self) -> None:
        """Test discriminator and payload."""
        plane = PassengerPlane(AircraftVariant.AIRBUS_A310, "P2", 200)
        assert plane.kind is PlaneKind.PASSENGER
        assert plane.payload == 200

    def test_passenger_count_is_settable(self) -> None:
        """Test changing the passenger count changes the takeoff weight."""
        plane = PassengerPlane(AircraftVariant.BOEING_737, "P3", 0)
        plane.passenger_count = 10
        assert plane.takeoff_weight == pytest.approx(26400.0 + 620.0)


class TestCargoAircraft:
    """Test CargoAircraft."""

    def test_takeoff_weight(self, cargo_747: CargoAircraft) -> None:
        """Test cargo weight plus empty weight."""
        assert cargo_747.takeoff_weight == pytest.approx(236000.0)

    def test_zero_cargo_equals_empty_weight(self) -> None:
        """Test an empty hold weighs the empty weight."""
        plane = CargoAircraft(AircraftVariant.AIRBUS_A310, "C0", 0.0)
        assert plane.takeoff_weight == plane.empty_weight == 82000.0

    def test_kind_and_payload(self, cargo_747: CargoAircraft) -> None:
        """Test discriminator and payload."""
        assert cargo_747.kind is PlaneKind.CARGO
        assert cargo_747.payload == 50000.0


class TestVariantChanges:
    """Test that empty weight follows the variant."""

    def test_setting_variant_updates_empty_weight(self) -> None:
        """Test the cached empty weight is refreshed on assignment."""
        plane = CargoAircraft(AircraftVariant.BOEING_737, "C2", 1000.0)
        assert plane.empty_weight == 26400.0

        plane.variant = AircraftVariant.BOEING_747
        assert plane.empty_weight == 186000.0
        assert plane.takeoff_weight == pytest.approx(187000.0)

    def test_unspecified_variant_is_unresolved(self) -> None:
        """Test weights cannot be computed without a variant."""
        plane = PassengerPlane(AircraftVariant.UNSPECIFIED, "P4", 10)

        with pytest.raises(UnresolvedVariantError):
            _ = plane.empty_weight
        with pytest.raises(UnresolvedVariantError):
            _ = plane.takeoff_weight

    def test_clearing_variant_invalidates_weight(self) -> None:
        """Test switching back to UNSPECIFIED drops the cached weight."""
        plane = CargoAircraft(AircraftVariant.AIRBUS_A320, "C3", 10.0)
        plane.variant = AircraftVariant.UNSPECIFIED

        with pytest.raises(UnresolvedVariantError):
            _ = plane.takeoff_weight

    def test_construction_does_not_validate(self) -> None:
        """Test invalid planes can be built; the fleet rejects them."""
        plane = PassengerPlane(AircraftVariant.UNSPECIFIED, "", 0)
        assert plane.number == ""


class TestClosedHierarchy:
    """Test that only the two plane kinds can exist."""

    def test_plane_is_abstract(self) -> None:
        """Test Plane itself cannot be instantiated."""
        with pytest.raises(TypeError):
            Plane(AircraftVariant.BOEING_737, "X")  # type: ignore[abstract]

    def test_subclass_without_kind_rejected(self) -> None:
        """Test a new plane class without a kind is refused."""
        with pytest.raises(TypeError, match="must declare a PlaneKind"):

            class Glider(Plane):  # noqa: F841
                pass

    def test_second_implementation_of_kind_rejected(self) -> None:
        """Test a kind cannot be implemented twice."""
        with pytest.raises(TypeError, match="already implemented"):

            class Freighter(CargoAircraft):  # noqa: F841
                kind = PlaneKind.CARGO


class TestEquality:
    """Test plane equality and representation."""

    def test_equal_fields_are_equal(self) -> None:
        """Test planes with the same fields compare equal."""
        a = PassengerPlane(AircraftVariant.BOEING_737, "P1", 120)
        b = PassengerPlane(AircraftVariant.BOEING_737, "P1", 120)
        assert a == b

    def test_kind_matters(self) -> None:
        """Test a cargo plane never equals a passenger plane."""
        a = PassengerPlane(AircraftVariant.BOEING_737, "P1", 100)
        b = CargoAircraft(AircraftVariant.BOEING_737, "P1", 100.0)
        assert a != b

    def test_repr(self, passenger_737: PassengerPlane) -> None:
        """Test repr shows the identifying fields."""
        assert repr(passenger_737) == "PassengerPlane(variant=BOEING_737, number='P1', payload=120)"


class TestCreatePlane:
    """Test the create_plane factory."""

    def test_passenger(self) -> None:
        """Test building a passenger plane."""
        plane = create_plane(PlaneKind.PASSENGER, AircraftVariant.AIRBUS_A320, "X1", 150)
        assert isinstance(plane, PassengerPlane)
        assert plane.passenger_count == 150

    def test_passenger_from_whole_float(self) -> None:
        """Test a whole float count is accepted as int."""
        plane = create_plane(PlaneKind.PASSENGER, AircraftVariant.AIRBUS_A320, "X1", 150.0)
        assert plane.payload == 150
        assert isinstance(plane.payload, int)

    def test_passenger_fractional_count_rejected(self) -> None:
        """Test a fractional passenger count is refused."""
        with pytest.raises(ValueError, match="whole number"):
            create_plane(PlaneKind.PASSENGER, AircraftVariant.AIRBUS_A320, "X1", 1.5)

    def test_passenger_large_count_is_exact(self) -> None:
        """Test integer counts beyond float precision are kept exactly."""
        plane = create_plane(PlaneKind.PASSENGER, AircraftVariant.BOEING_737, "P1", 2**53 + 1)
        assert plane.payload == 2**53 + 1

    @pytest.mark.parametrize(
        ("kind", "payload"),
        [
            (PlaneKind.PASSENGER, float("inf")),
            (PlaneKind.PASSENGER, float("nan")),
            (PlaneKind.CARGO, float("inf")),
            (PlaneKind.CARGO, float("nan")),
        ],
    )
    def test_non_finite_payload_rejected(self, kind: PlaneKind, payload: float) -> None:
        """Test infinite or NaN payloads are refused."""
        with pytest.raises(InvalidPlaneError, match="finite"):
            create_plane(kind, AircraftVariant.BOEING_747, "X1", payload)

    def test_cargo(self) -> None:
        """Test building a cargo plane."""
        plane = create_plane(PlaneKind.CARGO, AircraftVariant.BOEING_747, "C1", 50000)
        assert isinstance(plane, CargoAircraft)
        assert plane.cargo_weight == 50000.0

    def test_kind_from_name(self) -> None:
        """Test resolving kinds from discriminators and member names."""
        assert PlaneKind.from_name("CargoAircraft") is PlaneKind.CARGO
        assert PlaneKind.from_name("passenger") is PlaneKind.PASSENGER
        with pytest.raises(ValueError):
            PlaneKind.from_name("Helicopter")
