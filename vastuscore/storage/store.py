"""AnalysisStore — per-property Vastu analyses backed by SQLite."""

from __future__ import annotations

import logging
import sqlite3
from datetime import datetime, timezone
from pathlib import Path

from vastuscore.models.analysis import AnalysisSource, PropertyVastu, VastuInput, VastuScore

logger = logging.getLogger(__name__)

_SCHEMA = """\
CREATE TABLE IF NOT EXISTS property_vastu (
    id           INTEGER PRIMARY KEY AUTOINCREMENT,
    property_id  TEXT    NOT NULL,
    analyzed_by  TEXT    NOT NULL DEFAULT 'manual',
    last_updated TEXT    NOT NULL,
    overall      INTEGER NOT NULL,
    grade        TEXT    NOT NULL,
    input_json   TEXT    NOT NULL,
    score_json   TEXT    NOT NULL
);

CREATE INDEX IF NOT EXISTS idx_property_vastu_property ON property_vastu(property_id);
"""

_COLUMNS = "id, property_id, analyzed_by, last_updated, input_json, score_json"


class AnalysisStore:
    """Keeps every analysis run for a property; the newest one is current.

    Parameters
    ----------
    db_path:
        Path to the SQLite file.  Defaults to ``':memory:'``.
    """

    def __init__(self, db_path: str | Path = ":memory:") -> None:
        self._db_path = str(db_path)
        self._conn = sqlite3.connect(self._db_path)
        self._conn.row_factory = sqlite3.Row
        self._conn.execute("PRAGMA journal_mode=WAL")
        self._conn.executescript(_SCHEMA)
        self._conn.commit()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def save(
        self,
        property_id: str,
        data: VastuInput,
        score: VastuScore,
        analyzed_by: AnalysisSource | str = AnalysisSource.MANUAL,
    ) -> PropertyVastu:
        """Store an analysis for *property_id* and return the saved record."""
        record = PropertyVastu(
            property_id=property_id,
            data=data,
            score=score,
            last_updated=datetime.now(timezone.utc),
            analyzed_by=AnalysisSource(analyzed_by),
        )
        cur = self._conn.execute(
            "INSERT INTO property_vastu "
            "(property_id, analyzed_by, last_updated, overall, grade, input_json, score_json) "
            "VALUES (?,?,?,?,?,?,?)",
            (
                record.property_id,
                record.analyzed_by.value,
                record.last_updated.isoformat(),
                score.overall,
                score.grade.value,
                data.model_dump_json(),
                score.model_dump_json(),
            ),
        )
        self._conn.commit()
        record.id = cur.lastrowid or 0
        logger.info(
            "Saved Vastu analysis %d for property %s (score %d)",
            record.id, property_id, score.overall,
        )
        return record

    def get(self, property_id: str) -> PropertyVastu | None:
        """Return the latest analysis for *property_id*, or None."""
        row = self._conn.execute(
            f"SELECT {_COLUMNS} FROM property_vastu WHERE property_id = ? "
            "ORDER BY id DESC LIMIT 1",
            (property_id,),
        ).fetchone()
        if row is None:
            return None
        return self._row_to_record(row)

    def history(self, property_id: str) -> list[PropertyVastu]:
        """All analyses for *property_id*, oldest first."""
        rows = self._conn.execute(
            f"SELECT {_COLUMNS} FROM property_vastu WHERE property_id = ? ORDER BY id",
            (property_id,),
        ).fetchall()
        return [self._row_to_record(row) for row in rows]

    def list_properties(self) -> list[str]:
        rows = self._conn.execute(
            "SELECT DISTINCT property_id FROM property_vastu ORDER BY property_id"
        ).fetchall()
        return [row["property_id"] for row in rows]

    def delete(self, property_id: str) -> int:
        """Delete every analysis of *property_id*.  Returns rows removed."""
        cur = self._conn.execute(
            "DELETE FROM property_vastu WHERE property_id = ?", (property_id,)
        )
        self._conn.commit()
        return cur.rowcount

    def count(self) -> int:
        return self._conn.execute("SELECT COUNT(*) FROM property_vastu").fetchone()[0]

    def close(self) -> None:
        self._conn.close()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    @staticmethod
    def _row_to_record(row: sqlite3.Row) -> PropertyVastu:
        return PropertyVastu(
            id=row["id"],
            property_id=row["property_id"],
            data=VastuInput.model_validate_json(row["input_json"]),
            score=VastuScore.model_validate_json(row["score_json"]),
            last_updated=datetime.fromisoformat(row["last_updated"]),
            analyzed_by=AnalysisSource(row["analyzed_by"]),
        )
