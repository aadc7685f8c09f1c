"""Persistence of Vastu analyses per property."""

from vastuscore.storage.store import AnalysisStore

__all__ = ["AnalysisStore"]
