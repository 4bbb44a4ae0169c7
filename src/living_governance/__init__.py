"""living-governance: Living knowledge base for AI security framework coverage."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("living-governance")
except PackageNotFoundError:
    __version__ = "0.1.0"

__all__ = ["__version__"]
