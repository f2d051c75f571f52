"""Console menu for managing the fleet.

Options:
    1 - Add a plane
    2 - Show the fleet
    3 - Sort by takeoff weight
    4 - Average takeoff weight
    5 - Save the fleet to a file
    6 - Load the fleet from a file
    7 - Exit

Errors raised by the core (invalid plane, unreadable or malformed file) and
bad numeric input are reported to the user; the menu then keeps running.
"""

from collections.abc import Callable
from typing import Any

from airline.airline import Airline
from airline.core.logging_system import get_logger
from airline.fleet.exceptions import FleetError
from airline.fleet.plane import Plane, PlaneKind
from airline.fleet.variants import AircraftVariant
from airline.ui.menu import ConsoleMenu, MenuOption

logger = get_logger(__name__)

_KIND_SHORTCUTS = {"p": PlaneKind.PASSENGER, "c": PlaneKind.CARGO}


def format_plane(index: int, plane: Plane) -> str:
    """Render one fleet row, e.g. "1. PassengerPlane Boeing737 P1 (120 passengers) - 33840.0 kg"."""
    if plane.kind is PlaneKind.PASSENGER:
        payload = f"{plane.payload} passengers"
    else:
        payload = f"{plane.payload:.1f} kg cargo"
    return f"{index}. {plane.kind.value} {plane.variant.value} {plane.number} ({payload}) - {plane.takeoff_weight:.1f} kg"


class FleetMenu(ConsoleMenu):
    """Main menu of the fleet manager.

    Examples:
        >>> menu = FleetMenu(Airline())
        >>> menu.run()
    """

    def __init__(
        self,
        airline: Airline,
        input_func: Callable[[str], str] | None = None,
        output_func: Callable[[str], None] | None = None,
    ):
        super().__init__(input_func, output_func, sender_name="fleet_menu")
        self.airline = airline
        self._actions: dict[str, Callable[[], None]] = {
            "add": self._add_plane,
            "list": self._list_planes,
            "sort": self._sort_by_weight,
            "average": self._show_average,
            "save": self._save,
            "load": self._load,
            "exit": self.close,
        }

    def _get_title(self) -> str:
        return "\nChoose an option"

    def _build_options(self, context: Any) -> list[MenuOption]:
        return [
            MenuOption(key="1", label="Add a plane", data={"action": "add"}),
            MenuOption(key="2", label="Show the fleet", data={"action": "list"}),
            MenuOption(key="3", label="Sort by takeoff weight", data={"action": "sort"}),
            MenuOption(key="4", label="Average takeoff weight", data={"action": "average"}),
            MenuOption(key="5", label="Save the fleet", data={"action": "save"}),
            MenuOption(key="6", label="Load the fleet", data={"action": "load"}),
            MenuOption(key="7", label="Exit", data={"action": "exit"}),
        ]

    def _handle_selection(self, option: MenuOption) -> None:
        action = (option.data or {}).get("action", "")
        handler = self._actions.get(action)
        if handler is None:
            logger.error("No handler for menu action: %s", action)
            return

        try:
            handler()
        except (FleetError, ValueError) as e:
            logger.warning("Menu action '%s' failed: %s", action, e)
            self._output(f"Error: {e}")

    def _on_close(self) -> None:
        self._output("Exiting...")

    def _add_plane(self) -> None:
        kind = self._ask_kind()
        variants = ", ".join(v.value for v in AircraftVariant if v.is_specified)
        variant = AircraftVariant.from_name(self.prompt(f"Variant ({variants})"))
        number = self.prompt("Number")

        if kind is PlaneKind.PASSENGER:
            payload: float = int(self.prompt("Passenger count"))
        else:
            payload = float(self.prompt("Cargo weight (kg)"))

        plane = self.airline.add_plane(kind, variant, number, payload)
        self._output(f"Added {plane.kind.value} {plane.number}, takeoff weight {plane.takeoff_weight:.1f} kg")

    def _ask_kind(self) -> PlaneKind:
        answer = self.prompt("Kind (p = passenger, c = cargo)").lower()
        if answer in _KIND_SHORTCUTS:
            return _KIND_SHORTCUTS[answer]
        return PlaneKind.from_name(answer)

    def _list_planes(self) -> None:
        planes = self.airline.list_planes()
        if not planes:
            self._output("The fleet is empty.")
            return
        for index, plane in enumerate(planes, start=1):
            self._output(format_plane(index, plane))

    def _sort_by_weight(self) -> None:
        self.airline.sort_by_weight()
        self._list_planes()

    def _show_average(self) -> None:
        self._output(f"Average takeoff weight: {self.airline.average_weight():.1f} kg")

    def _save(self) -> None:
        path = self.prompt("File", default=self.airline.settings.default_path)
        self.airline.save(path)
        self._output(f"Saved {len(self.airline.fleet)} planes to {path}")

    def _load(self) -> None:
        path = self.prompt("File", default=self.airline.settings.default_path)
        self.airline.load(path)
        self._output(f"Loaded {len(self.airline.fleet)} planes from {path}")
