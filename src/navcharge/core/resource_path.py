"""Resource path resolution for development and packaged applications.

Resolves the bundled ``config/`` and ``data/`` directories whether running
from a source checkout or from a PyInstaller bundle.

Typical usage:
    from navcharge.core.resource_path import get_config_path, get_data_path

    logging_config = get_config_path("logging.yaml")
    waypoints_csv = get_data_path("waypoints.csv")
"""

import sys
from pathlib import Path


def is_bundled() -> bool:
    """Check if running from a PyInstaller bundle."""
    return hasattr(sys, "_MEIPASS")


def get_project_root() -> Path:
    """Get the project root directory.

    Returns:
        Path to project root:
        - When running from source: the checkout root (parent of ``src/``)
        - When bundled: the temporary bundle directory containing resources
    """
    if is_bundled():
        return Path(getattr(sys, "_MEIPASS"))
    # src/navcharge/core -> project root
    return Path(__file__).parent.parent.parent.parent


def get_resource_path(relative_path: str) -> Path:
    """Get absolute path to a resource file or directory.

    Args:
        relative_path: Relative path from project root (e.g., "config/logging.yaml")

    Returns:
        Absolute path to the resource.
    """
    return get_project_root() / relative_path


def get_config_path(config_file: str) -> Path:
    """Get path to a configuration file under ``config/``.

    Examples:
        >>> str(get_config_path("settings.yaml"))
        '/home/user/dev/navcharge/config/settings.yaml'
    """
    return get_resource_path(f"config/{config_file}")


def get_data_path(data_file: str) -> Path:
    """Get path to a data file under ``data/``.

    Examples:
        >>> str(get_data_path("waypoints.csv"))
        '/home/user/dev/navcharge/data/waypoints.csv'
    """
    return get_resource_path(f"data/{data_file}")
