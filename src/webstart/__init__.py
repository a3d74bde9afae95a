"""webstart: scaffold new projects from remote template repositories."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("webstart")
except PackageNotFoundError:
    __version__ = "0.0.0"
