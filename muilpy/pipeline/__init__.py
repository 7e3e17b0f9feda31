"""Shared parse carrier."""

from muilpy.pipeline.result import MuilParseResult

__all__ = ["MuilParseResult"]
