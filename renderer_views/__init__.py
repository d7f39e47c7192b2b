"""Renderer Views: view resolution for Jinja2 definitions"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("renderer-views")
except PackageNotFoundError:
    __version__ = "dev"
