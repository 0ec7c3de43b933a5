"""Incremental in-buffer search."""

from .controller import SearchController, SearchPhase

__all__ = ["SearchController", "SearchPhase"]
