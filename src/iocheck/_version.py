"""Single source of truth for the iocheck version."""

import re
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _metadata_version
from pathlib import Path


def get_version() -> str:
    """
    Get the iocheck version.

    A source checkout reads pyproject.toml; an installed package reads its
    distribution metadata. "0.0.0" means neither is available.
    """
    pyproject = Path(__file__).parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        content = pyproject.read_text()
        if match := re.search(r'^version\s*=\s*["\']([^"\']+)["\']', content, re.MULTILINE):
            return match.group(1)
    try:
        return _metadata_version("iocheck")
    except PackageNotFoundError:
        return "0.0.0"


__version__ = get_version()
