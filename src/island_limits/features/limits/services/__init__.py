"""Limit services package."""

from .limit_merger import LimitMerger, MergeResult

__all__ = ["LimitMerger", "MergeResult"]
