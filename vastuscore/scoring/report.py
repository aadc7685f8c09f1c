"""VastuReport and Markdown/JSON generation for VASTU.md."""

from __future__ import annotations

import json
from datetime import datetime, timezone
from typing import Any

from vastuscore.domain.directions import direction_name
from vastuscore.domain.rooms import Placement
from vastuscore.models.analysis import Severity, VastuInput, VastuScore

# Radar chart axes: (label, breakdown field)
RADAR_AXES = (
    ("Entry", "entry_score"),
    ("Rooms", "room_placement_score"),
    ("Sleeping", "sleeping_direction_score"),
    ("Spaces", "open_space_score"),
)


class VastuReport:
    """A scored analysis together with the input that produced it.

    The score does not point back to its input, so the report holds both.
    """

    def __init__(
        self,
        vastu_input: VastuInput,
        score: VastuScore,
        property_id: str = "",
        generated_at: datetime | None = None,
    ) -> None:
        self.input = vastu_input
        self.score = score
        self.property_id = property_id
        self.generated_at = generated_at or datetime.now(timezone.utc)

    def radar_data(self) -> list[tuple[str, int]]:
        """(category, score) pairs for a radar-style breakdown chart."""
        breakdown = self.score.breakdown
        return [(label, getattr(breakdown, field)) for label, field in RADAR_AXES]

    def summary_text(self) -> str:
        """One-line text for sharing the result."""
        return (
            f"My property scored {self.score.overall}/100 on Vastu compliance "
            f"({self.score.grade.value})! Check your property's Vastu score."
        )

    def to_markdown(self) -> str:
        """Generate VASTU.md content."""
        lines: list[str] = []
        score = self.score

        lines.append(f"# Vastu Report — {self.property_id or 'Unnamed property'}")
        lines.append("")
        lines.append(f"**Score:** {score.overall}/100")
        lines.append(f"**Grade:** {score.grade.value}")
        lines.append(f"**Main Entry:** {direction_name(self.input.main_entry)}")
        lines.append(f"**Generated:** {self.generated_at.strftime('%Y-%m-%d %H:%M UTC')}")
        lines.append("")

        lines.append("## Score Breakdown")
        lines.append("")
        lines.append("| Category | Score |")
        lines.append("|----------|-------|")
        for label, value in self.radar_data():
            lines.append(f"| {label} | {value}/100 |")
        lines.append("")

        if score.room_scores:
            labels = {room.id: room.display_label for room in self.input.rooms}
            lines.append("## Room Placement")
            lines.append("")
            lines.append("| Room | Direction | Placement | Score |")
            lines.append("|------|-----------|-----------|-------|")
            for rs in score.room_scores:
                label = labels.get(rs.room_id, rs.room_type.value)
                lines.append(
                    f"| {label} | {direction_name(rs.direction)} | "
                    f"{_placement_text(rs.placement)} | {rs.score} |"
                )
            lines.append("")

        lines.append("## Compliant")
        lines.append("")
        if score.compliant_items:
            lines.extend(f"- {item}" for item in score.compliant_items)
        else:
            lines.append("No compliant items found.")
        lines.append("")

        lines.append("## Needs Attention")
        lines.append("")
        if score.non_compliant_items:
            lines.extend(f"- {item}" for item in score.non_compliant_items)
        else:
            lines.append("No Vastu violations found.")
        lines.append("")

        if score.recommendations:
            lines.append("## Recommendations")
            lines.append("")
            for rec in score.recommendations:
                lines.append(f"- **[{_severity_badge(rec.severity)}] {rec.title}**")
                lines.append(f"  {rec.description}")
                lines.append(f"  *Current:* {rec.current_state}")
                lines.append(f"  *Ideal:* {rec.ideal_state}")
                lines.append("")

        return "\n".join(lines)

    def to_dict(self) -> dict[str, Any]:
        return {
            "property_id": self.property_id,
            "generated_at": self.generated_at.isoformat(),
            "input": self.input.model_dump(mode="json"),
            "score": self.score.model_dump(mode="json"),
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2)


def _placement_text(placement: Placement) -> str:
    return {
        Placement.IDEAL: "Ideal",
        Placement.ACCEPTABLE: "Acceptable",
        Placement.AVOID: "Avoid",
    }[placement]


def _severity_badge(severity: Severity) -> str:
    return {
        Severity.HIGH: "HIGH",
        Severity.MEDIUM: "MEDIUM",
        Severity.LOW: "LOW",
    }[severity]
