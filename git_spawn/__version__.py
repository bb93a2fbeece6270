"""Version information for git-spawn."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("git-spawn")
except PackageNotFoundError:
    # Running from source without an installed distribution
    __version__ = "0.0.0+unknown"
