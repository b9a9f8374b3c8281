"""projctl — in-memory project tracker with validated input and change listeners."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("projctl")
except PackageNotFoundError:  # pragma: no cover - source checkout without install
    __version__ = "0.0.0"
