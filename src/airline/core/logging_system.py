"""Logging setup for the airline fleet manager.

Logging is configured from a YAML file (or built-in defaults) with a console
handler, a combined log file, and optional per-component overrides.

Platform-specific log locations:
    - macOS: ~/Library/Logs/Airline/airline.log
    - Linux: ~/.airline/logs/airline.log
    - Windows: %AppData%/Airline/Logs/airline.log

Each start rotates the combined log, keeping the last 5 runs.

Typical usage example:
    from airline.core.logging_system import get_logger

    logger = get_logger(__name__)
    logger.info("Loaded %d planes from %s", count, path)
"""

import logging
import logging.handlers
import os
import platform
import time
from pathlib import Path
from typing import Any

import yaml

_logging_config: dict[str, Any] = {}
_loggers_cache: dict[str, logging.Logger] = {}
_initialized = False


class LoggingError(Exception):
    """Raised when logging system operations fail."""


def get_platform_log_dir() -> Path:
    """Get platform-specific log directory.

    Returns:
        Path to the platform-appropriate log directory:
        - macOS: ~/Library/Logs/Airline
        - Linux: ~/.airline/logs
        - Windows: %AppData%/Airline/Logs
    """
    system = platform.system()

    if system == "Darwin":
        return Path.home() / "Library" / "Logs" / "Airline"
    elif system == "Windows":
        appdata = Path(os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming"))
        return appdata / "Airline" / "Logs"
    else:
        return Path.home() / ".airline" / "logs"


def rotate_logs(log_dir: Path, log_filename: str = "airline.log", keep_count: int = 5) -> None:
    """Rotate logs on startup, keeping the last N runs.

    Renames the current log to <name>.1, shifts older logs up by one and
    deletes the log beyond keep_count.

    Args:
        log_dir: Directory containing log files.
        log_filename: Base name of the log file.
        keep_count: Number of old logs to keep.

    Examples:
        >>> rotate_logs(Path("logs"), "airline.log", 5)
        # airline.log -> airline.log.1
        # airline.log.1 -> airline.log.2
        # ...
        # airline.log.5 -> deleted
    """
    log_file = log_dir / log_filename

    if not log_file.exists():
        return

    oldest_log = log_dir / f"{log_filename}.{keep_count}"
    if oldest_log.exists():
        oldest_log.unlink()

    for i in range(keep_count - 1, 0, -1):
        old_log = log_dir / f"{log_filename}.{i}"
        if old_log.exists():
            old_log.rename(log_dir / f"{log_filename}.{i + 1}")

    log_file.rename(log_dir / f"{log_filename}.1")


def initialize_logging(config_path: str | Path | None = None, use_platform_dir: bool = True) -> None:
    """Initialize the logging system from YAML configuration.

    Call once at startup, before any logging occurs. Until then, records
    propagate to Python's default last-resort handler.

    Args:
        config_path: Path to logging configuration YAML file.
            If None, uses default configuration.
        use_platform_dir: If True, log to the platform-specific directory.
            If False, use `log_dir` from the config (for development/testing).

    Raises:
        LoggingError: If the configuration cannot be loaded.

    Examples:
        >>> initialize_logging("config/logging.yaml")
        >>> logger = get_logger("airline.fleet")
    """
    global _logging_config, _initialized

    if config_path:
        config_path = Path(config_path)
        if not config_path.exists():
            raise LoggingError(f"Logging config file not found: {config_path}")

        try:
            with config_path.open("r", encoding="utf-8") as f:
                loaded = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise LoggingError(f"Failed to load logging config: {e}") from e

        if not isinstance(loaded, dict):
            raise LoggingError(f"Logging config root must be a mapping: {config_path}")

        _logging_config = {**_get_default_config(), **loaded}
    else:
        _logging_config = _get_default_config()

    if use_platform_dir:
        _logging_config["log_dir"] = str(get_platform_log_dir())

    log_dir = Path(_logging_config["log_dir"])
    log_dir.mkdir(parents=True, exist_ok=True)

    combined = _logging_config.get("combined_log", {})
    if combined.get("enabled", True):
        rotate_logs(log_dir, combined.get("filename", "airline.log"), combined.get("backup_count", 5))

    _configure_root_logger()
    _apply_component_levels()

    _initialized = True


def _get_default_config() -> dict[str, Any]:
    """Get default logging configuration."""
    return {
        "version": 1,
        "level": "INFO",
        "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        "date_format": "%Y-%m-%d %H:%M:%S",
        "log_dir": "logs",
        "combined_log": {
            "enabled": True,
            "filename": "airline.log",
            "backup_count": 5,
        },
        "console": {
            "enabled": True,
            "level": "WARNING",
        },
        "components": {},
    }


def _configure_root_logger() -> None:
    """Attach console and combined-file handlers to the root logger."""
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, _logging_config.get("level", "INFO")))

    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    console_config = _logging_config.get("console", {})
    if console_config.get("enabled", True):
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_config.get("level", "WARNING")))
        console_handler.setFormatter(_get_formatter())
        root_logger.addHandler(console_handler)

    combined_config = _logging_config.get("combined_log", {})
    if combined_config.get("enabled", True):
        log_file = Path(_logging_config["log_dir"]) / combined_config.get("filename", "airline.log")

        # Rotation already happened in initialize_logging
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(_get_formatter())
        root_logger.addHandler(file_handler)


def _apply_component_levels() -> None:
    """Apply component settings to configured and already-requested loggers."""
    names = set(_loggers_cache) | set(_logging_config.get("components", {}))
    for name in names:
        logger = _loggers_cache.setdefault(name, logging.getLogger(name))
        _configure_component(name, logger)


class MillisecondFormatter(logging.Formatter):
    """Formatter that appends milliseconds with a dot separator."""

    def formatTime(self, record, datefmt=None):
        ct = self.converter(record.created)
        s = time.strftime(datefmt or "%Y-%m-%d %H:%M:%S", ct)
        return f"{s}.{int(record.msecs):03d}"


def _get_formatter() -> logging.Formatter:
    fmt = _logging_config.get("format", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    datefmt = _logging_config.get("date_format", "%Y-%m-%d %H:%M:%S")
    return MillisecondFormatter(fmt, datefmt)


def _configure_component(name: str, logger: logging.Logger) -> None:
    """Apply the `components.<name>` section of the config to a logger.

    Supported keys: `enabled`, `level` and `dedicated_file` (with optional
    `max_bytes` and `backup_count`).
    """
    component_config = _logging_config.get("components", {}).get(name, {})

    for handler in list(logger.handlers):
        if isinstance(handler, logging.handlers.RotatingFileHandler):
            logger.removeHandler(handler)
            handler.close()

    if not component_config.get("enabled", True):
        logger.disabled = True
        return

    logger.disabled = False
    if "level" in component_config:
        logger.setLevel(getattr(logging, component_config["level"]))

    if component_config.get("dedicated_file", False):
        log_file = Path(_logging_config.get("log_dir", "logs")) / f"{name}.log"
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=component_config.get("max_bytes", 10485760),
            backupCount=component_config.get("backup_count", 5),
            encoding="utf-8",
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(_get_formatter())
        logger.addHandler(file_handler)


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a module or component.

    Loggers are cached. Settings for a logger can be given in the logging
    config YAML under the `components` section, keyed by logger name.

    Args:
        name: Logger name (typically `__name__`).

    Returns:
        Configured logger instance.

    Examples:
        >>> logger = get_logger("airline.serialization.json_codec")
        >>> logger.info("Saved %d planes", count)

    Note:
        Use lazy formatting (%) instead of f-strings.
    """
    if name in _loggers_cache:
        return _loggers_cache[name]

    logger = logging.getLogger(name)
    if _initialized:
        _configure_component(name, logger)

    _loggers_cache[name] = logger
    return logger


def shutdown_logging() -> None:
    """Flush and close all handlers. Call at application shutdown."""
    global _initialized

    logging.shutdown()

    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)

    for logger in _loggers_cache.values():
        for handler in list(logger.handlers):
            logger.removeHandler(handler)

    _loggers_cache.clear()
    _initialized = False
