"""Generic console menu.

This module provides a reusable base class for numbered text menus driven by
an input function and an output function, so a menu can run on a terminal or
be scripted in tests.

Typical usage:
    class MyMenu(ConsoleMenu):
        def _get_title(self):
            return "Choose an option"

        def _build_options(self, context):
            return [
                MenuOption(key="1", label="Do something", data={"action": "do_something"}),
                MenuOption(key="2", label="Exit", data={"action": "exit"}),
            ]

        def _handle_selection(self, option):
            if option.data["action"] == "exit":
                self.close()

    MyMenu().run()
"""

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from airline.core.logging_system import get_logger

logger = get_logger(__name__)


@dataclass
class MenuOption:
    """Represents a single menu option.

    Attributes:
        key: Key to select this option (e.g., "1", "2").
        label: Human-readable label shown in menu.
        data: Additional data associated with this option (menu-specific).
        enabled: Whether this option is currently selectable.
    """

    key: str
    label: str
    data: dict[str, Any] | None = None
    enabled: bool = True


class ConsoleMenu(ABC):
    """Base class for interactive console menus.

    Provides standard menu functionality:
    - Open/close menu
    - Print the options
    - Select an option by key
    - Run an input loop until the menu closes

    Subclasses must implement:
    - _get_title(): Heading printed above the options
    - _build_options(context): Build menu options
    - _handle_selection(option): Handle option selection

    Subclasses can optionally override:
    - _on_open(): Called after menu opens
    - _on_close(): Called before menu closes
    - _is_available(): Check if menu can be opened
    """

    def __init__(
        self,
        input_func: Callable[[str], str] | None = None,
        output_func: Callable[[str], None] | None = None,
        sender_name: str = "menu",
    ):
        """Initialize menu.

        Args:
            input_func: Reads one line of user input, given a prompt
                (default: the builtin input()).
            output_func: Writes one line of output (default: print()).
            sender_name: Name used in log messages.
        """
        self._input = input_func or input
        self._output = output_func or print
        self._sender_name = sender_name
        self._state = "CLOSED"  # CLOSED, OPEN
        self._current_options: list[MenuOption] = []

        logger.debug("%s initialized", sender_name)

    def open(self, context: Any = None) -> bool:
        """Open the menu.

        Args:
            context: Optional context for building menu options (menu-specific).

        Returns:
            True if menu opened successfully, False otherwise.
        """
        if not self._is_available(context):
            logger.warning("%s not available", self._sender_name)
            return False

        self._current_options = self._build_options(context)

        if not self._current_options:
            logger.warning("%s has no options", self._sender_name)
            return False

        self._state = "OPEN"
        logger.info("%s opened with %d options", self._sender_name, len(self._current_options))

        self._on_open(context)
        return True

    def close(self) -> None:
        """Close the menu."""
        if self._state == "CLOSED":
            return

        self._on_close()

        self._state = "CLOSED"
        self._current_options = []
        logger.debug("%s closed", self._sender_name)

    def show(self) -> None:
        """Print the title and the enabled options."""
        self._output(self._get_title())
        for option in self._current_options:
            if option.enabled:
                self._output(f"{option.key} - {option.label}")

    def select_option(self, key: str) -> bool:
        """Select a menu option by key.

        Args:
            key: Option key (e.g., "1", "2", "3").

        Returns:
            True if option was found and selected, False otherwise.
        """
        if self._state != "OPEN":
            logger.warning("%s cannot select option in state: %s", self._sender_name, self._state)
            return False

        selected_option = None
        for option in self._current_options:
            if option.key == key and option.enabled:
                selected_option = option
                break

        if not selected_option:
            logger.debug("%s invalid or disabled option: %s", self._sender_name, key)
            self._output("Command not recognised.")
            return False

        logger.info("%s selected: %s", self._sender_name, selected_option.label)
        self._handle_selection(selected_option)
        return True

    def run(self, context: Any = None) -> None:
        """Show the menu and handle selections until it is closed.

        End of input (EOFError) closes the menu.
        """
        if not self.open(context):
            return

        while self.is_open():
            self.show()
            try:
                self.select_option(self._input("> ").strip())
            except EOFError:
                logger.info("%s reached end of input", self._sender_name)
                self.close()

    def prompt(self, message: str, default: str | None = None) -> str:
        """Ask the user for a line of text.

        Args:
            message: Prompt text.
            default: Value used when the answer is empty.

        Returns:
            The stripped answer, or default if the answer was empty.
        """
        suffix = f" [{default}]" if default is not None else ""
        answer = self._input(f"{message}{suffix}: ").strip()
        if not answer and default is not None:
            return default
        return answer

    def is_open(self) -> bool:
        """Check if menu is currently open."""
        return self._state == "OPEN"

    def get_state(self) -> str:
        """Get current menu state."""
        return self._state

    def get_current_options(self) -> list[MenuOption]:
        """Get a copy of the current options list."""
        return self._current_options.copy()

    # Abstract methods (must be implemented by subclasses)

    @abstractmethod
    def _get_title(self) -> str:
        """Get the heading printed above the options."""

    @abstractmethod
    def _build_options(self, context: Any) -> list[MenuOption]:
        """Build menu options based on context.

        Args:
            context: Context for building options (menu-specific).

        Returns:
            List of MenuOption objects.
        """

    @abstractmethod
    def _handle_selection(self, option: MenuOption) -> None:
        """Handle selection of a menu option.

        Args:
            option: The selected MenuOption.
        """

    # Optional customization hooks

    def _is_available(self, context: Any) -> bool:
        """Check if menu is available to be opened. Defaults to True."""
        return True

    def _on_open(self, context: Any) -> None:
        """Called after menu opens successfully."""

    def _on_close(self) -> None:
        """Called before menu closes."""
