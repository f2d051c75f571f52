"""Airline fleet manager - console entry point.

Typical usage:
    python -m airline.main
    python -m airline.main --load fleet.xml
    python -m airline.main --config ~/.airline/airline.yaml --no-platform-logs
"""

import argparse
import sys

from airline.airline import Airline
from airline.core.config import ConfigError, load_settings
from airline.core.logging_system import get_logger, initialize_logging, shutdown_logging
from airline.core.resource_path import get_config_path
from airline.fleet.exceptions import FleetError
from airline.ui.fleet_menu import FleetMenu

logger = get_logger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Args:
        argv: Arguments to parse (defaults to sys.argv[1:]).

    Returns:
        Parsed arguments
    """
    parser = argparse.ArgumentParser(description="Airline fleet manager")

    parser.add_argument(
        "--config",
        type=str,
        help="User configuration YAML merged over the shipped defaults",
    )

    parser.add_argument(
        "--load",
        type=str,
        metavar="PATH",
        help="Fleet file (.xml or .json) to load at startup",
    )

    parser.add_argument(
        "--log-config",
        type=str,
        help="Logging configuration YAML (default: config/logging.yaml)",
    )

    parser.add_argument(
        "--no-platform-logs",
        action="store_true",
        help="Write logs to the log_dir from the logging config instead of the platform log directory",
    )

    return parser.parse_args(argv)


def _setup_logging(args: argparse.Namespace) -> None:
    use_platform_dir = not args.no_platform_logs
    if args.log_config:
        initialize_logging(args.log_config, use_platform_dir=use_platform_dir)
        return

    logging_config = get_config_path("logging.yaml")
    if logging_config.exists():
        initialize_logging(logging_config, use_platform_dir=use_platform_dir)
    else:
        initialize_logging(use_platform_dir=use_platform_dir)


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success).
    """
    args = parse_args(argv)
    _setup_logging(args)
    logger.info("Airline fleet manager starting up...")

    try:
        airline = Airline(load_settings(args.config))
        if args.load:
            airline.load(args.load)
        FleetMenu(airline).run()
        return 0
    except (ConfigError, FleetError) as e:
        logger.error("Startup failed: %s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except Exception as e:  # pylint: disable=broad-exception-caught
        logger.exception("Fatal error: %s", e)
        return 1
    finally:
        logger.info("Airline fleet manager shutting down")
        shutdown_logging()


if __name__ == "__main__":
    sys.exit(main())
