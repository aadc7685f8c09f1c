"""VastuChecker — the single entry point for Vastu analyses.

Usage::

    from vastuscore import VastuChecker

    checker = VastuChecker(project_root="/path/to/project")
    score = checker.analyze(vastu_input)
    record = checker.analyze_property("listing-42", vastu_input)
    print(checker.report(vastu_input).to_markdown())

    wizard = checker.new_wizard()
"""

from __future__ import annotations

import logging
from pathlib import Path

from vastuscore.config_manager import ConfigManager, weights_from_config
from vastuscore.models.analysis import AnalysisSource, PropertyVastu, VastuInput, VastuScore
from vastuscore.scoring.engine import VastuEngine
from vastuscore.scoring.report import VastuReport
from vastuscore.storage.store import AnalysisStore
from vastuscore.workflow.wizard import VastuWizard

logger = logging.getLogger(__name__)


class VastuChecker:
    """The public interface of vastuscore.

    Parameters
    ----------
    project_root:
        Directory holding ``.env`` and ``.vastu/config.json``.
    config:
        Already-loaded configuration.  If *None*, it is loaded from
        *project_root* with :class:`ConfigManager`.

    Raises
    ------
    ConfigError
        If the configuration has an unknown log level or unusable weights.
    """

    def __init__(
        self,
        project_root: str | Path = ".",
        *,
        config: dict[str, str] | None = None,
    ) -> None:
        self.project_root = Path(project_root)
        manager = ConfigManager()
        self.config = config if config is not None else manager.load_config(self.project_root)
        manager.check_config(self.config)

        level = self.config.get("VASTU_LOG_LEVEL", "INFO").upper()
        logging.getLogger("vastuscore").setLevel(level)

        self.engine = VastuEngine(weights_from_config(self.config))
        self.store = AnalysisStore(self._resolve_db_path(self.config.get("VASTU_ANALYSIS_DB", ":memory:")))
        logger.debug("VastuChecker ready (env=%s)", self.config.get("VASTU_ENV"))

    def analyze(self, vastu_input: VastuInput) -> VastuScore:
        """Score *vastu_input* without storing it."""
        return self.engine.score(vastu_input)

    def analyze_property(
        self,
        property_id: str,
        vastu_input: VastuInput,
        analyzed_by: AnalysisSource | str = AnalysisSource.MANUAL,
    ) -> PropertyVastu:
        """Score *vastu_input* and store the result against *property_id*."""
        score = self.engine.score(vastu_input)
        return self.store.save(property_id, vastu_input, score, analyzed_by)

    def get_analysis(self, property_id: str) -> PropertyVastu | None:
        """Latest stored analysis for *property_id*."""
        return self.store.get(property_id)

    def report(
        self,
        vastu_input: VastuInput,
        score: VastuScore | None = None,
        property_id: str = "",
    ) -> VastuReport:
        """Build a report, scoring *vastu_input* if no score is given."""
        if score is None:
            score = self.engine.score(vastu_input)
        return VastuReport(vastu_input, score, property_id=property_id)

    def new_wizard(self) -> VastuWizard:
        """Start a step-by-step analysis session using this checker's engine."""
        return VastuWizard(self.engine)

    def close(self) -> None:
        self.store.close()

    def _resolve_db_path(self, db_path: str) -> str:
        if db_path == ":memory:" or Path(db_path).is_absolute():
            return db_path
        return str(self.project_root / db_path)
