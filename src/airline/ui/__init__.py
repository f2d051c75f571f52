"""Console user interface components."""

from airline.ui.fleet_menu import FleetMenu
from airline.ui.menu import ConsoleMenu, MenuOption

__all__ = ["ConsoleMenu", "FleetMenu", "MenuOption"]
