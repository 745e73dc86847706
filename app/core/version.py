# app/core/version.py
"""Version lookup from a VERSION file or the installed distribution."""
from functools import lru_cache
from importlib.metadata import PackageNotFoundError, version as distribution_version
from pathlib import Path


VERSION_FILE = Path(__file__).parent.parent.parent / "VERSION"
DISTRIBUTION_NAME = "zeropay-gateway"


@lru_cache()
def get_version() -> str:
    """Return the gateway version string.

    Priority:
    1. VERSION file (for Docker/production)
    2. Installed package metadata (pip install / pip install -e)
    3. Fallback to 0.0.0-unknown
    """
    if VERSION_FILE.exists():
        version = VERSION_FILE.read_text().strip()
        if version:
            return version

    try:
        return distribution_version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        return "0.0.0-unknown"


VERSION = get_version()
