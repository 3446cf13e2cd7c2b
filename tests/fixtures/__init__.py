"""Shared pytest fixtures and helpers."""

from .core import *  # noqa: F401,F403
from .factory import Factory  # noqa: F401
