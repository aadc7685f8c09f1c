"""vastuscore — rule-based Vastu Shastra compliance scoring for dwellings."""

__version__ = "1.0.0"

from vastuscore.api.facade import VastuChecker
from vastuscore.config_manager import ConfigError, ConfigManager
from vastuscore.domain import (
    CardinalDirection,
    Direction,
    Placement,
    RoomType,
    get_direction_config,
    get_room_config,
)
from vastuscore.models import (
    Grade,
    OpenSpaces,
    PropertyVastu,
    Recommendation,
    RoomVastu,
    Severity,
    VastuInput,
    VastuScore,
)
from vastuscore.scoring import (
    ScoringWeights,
    VastuEngine,
    VastuReport,
    calculate_vastu_score,
)
from vastuscore.storage import AnalysisStore
from vastuscore.workflow import VastuWizard, WizardError, WizardStep

__all__ = [
    "__version__",
    # Facade
    "VastuChecker",
    "ConfigError",
    "ConfigManager",
    # Domain
    "CardinalDirection",
    "Direction",
    "Placement",
    "RoomType",
    "get_direction_config",
    "get_room_config",
    # Models
    "Grade",
    "OpenSpaces",
    "PropertyVastu",
    "Recommendation",
    "RoomVastu",
    "Severity",
    "VastuInput",
    "VastuScore",
    # Scoring
    "ScoringWeights",
    "VastuEngine",
    "VastuReport",
    "calculate_vastu_score",
    # Storage and workflow
    "AnalysisStore",
    "VastuWizard",
    "WizardError",
    "WizardStep",
]
