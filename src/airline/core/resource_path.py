"""Resource path resolution.

Configuration files ship in the `config/` directory at the project root.

Typical usage:
    from airline.core.resource_path import get_config_path

    logging_config = get_config_path("logging.yaml")
"""

from pathlib import Path


def get_project_root() -> Path:
    """Get the project root directory.

    Returns:
        Path to the project root (three levels above src/airline/core).
    """
    return Path(__file__).parent.parent.parent.parent


def get_config_path(config_file: str) -> Path:
    """Get path to a configuration file.

    Args:
        config_file: Config filename (e.g., "logging.yaml").

    Returns:
        Absolute path to the config file. The file may not exist when the
        package is installed without the project tree.

    Examples:
        >>> str(get_config_path("airline.yaml"))
        '/home/user/dev/airline/config/airline.yaml'
    """
    return get_project_root() / "config" / config_file
