"""Local-LLM commit message generator CLI tool."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("commitgenius")
except PackageNotFoundError:
    # Fallback for development mode
    __version__ = "0.0.0-dev"
