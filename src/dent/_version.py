"""Installed version of the Dent distribution."""

from importlib.metadata import PackageNotFoundError, version


def get_version() -> str:
    try:
        return version("dent")
    except PackageNotFoundError:
        # Running from a source tree that was never installed
        return "0.0.0"


__version__ = get_version()
