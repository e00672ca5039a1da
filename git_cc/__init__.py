"""Interactive conventional commit wizard for git."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("git-cc")
except PackageNotFoundError:
    # Fallback for development mode
    __version__ = "0.0.0-dev"
