"""Public facade."""

from vastuscore.api.facade import VastuChecker

__all__ = ["VastuChecker"]
