"""Editable line buffer model."""

from .line import Line
from .model import Buffer

__all__ = ["Buffer", "Line"]
