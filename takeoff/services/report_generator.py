"""Summary Report Generator.

Renders an AnalysisResult as a markdown text report: summary figures,
one table per category, grand totals with markups, breakdowns and the
notes collected during the run.
"""

from typing import List

from takeoff.models.analysis import AnalysisResult, AnalysisType, CategoryTotal

TRADE_TITLES = {
    "plumbing": "Plumbing",
    "sheathing": "Sheathing",
    "acoustical": "Acoustical Ceiling",
    "framing": "Framing",
    "carpentry": "Carpentry",
    "mechanical": "Mechanical",
}


def _money(value: float) -> str:
    return f"${value:,.2f}"


def _quantity(value: float) -> str:
    if float(value).is_integer():
        return f"{int(value):,}"
    return f"{value:,.2f}"


class SummaryReportGenerator:
    """Render analysis results as human-readable text."""

    def render(self, result: AnalysisResult) -> str:
        """Render the full report.

        Args:
            result: Completed analysis.

        Returns:
            Markdown text.
        """
        title = TRADE_TITLES.get(result.trade.value, result.trade.value.title())
        lines: List[str] = [f"# {title} Material Takeoff", ""]

        priced = result.analysis_type != AnalysisType.MATERIALS
        lines.extend(self._summary(result))
        for category in result.category_totals:
            lines.extend(self._category(category, show_prices=priced))
        if priced:
            lines.extend(self._grand_totals(result))
        lines.extend(self._breakdowns(result))
        lines.extend(self._notes(result))

        return "\n".join(lines).rstrip() + "\n"

    def _summary(self, result: AnalysisResult) -> List[str]:
        lines = ["## Summary", ""]
        lines.append(f"Analysis Type: {result.analysis_type.value}")
        if result.total_area:
            lines.append(f"Total Area: {result.total_area:,.1f} sq ft")
        if result.total_linear_feet:
            lines.append(f"Total Linear Feet: {result.total_linear_feet:,.1f} LF")
        lines.append(f"Waste Factor Applied: {result.waste_factor_pct:g}%")
        if result.labor_hours:
            lines.append(f"Labor Hours: {result.labor_hours:,.2f}")
        lines.append("")
        return lines

    def _category(self, category: CategoryTotal, show_prices: bool) -> List[str]:
        lines = [f"## {category.category}", ""]
        if show_prices:
            lines.append("| Description | Quantity | Unit | Unit Price | Total |")
            lines.append("|-------------|----------|------|------------|-------|")
            for item in category.items:
                lines.append(
                    f"| {item.description} | {_quantity(item.quantity)} | {item.unit} | "
                    f"{_money(item.unit_price)} | {_money(item.total_price)} |"
                )
            lines.append(f"| **Subtotal** | | | | {_money(category.subtotal)} |")
        else:
            lines.append("| Description | Quantity | Unit |")
            lines.append("|-------------|----------|------|")
            for item in category.items:
                lines.append(f"| {item.description} | {_quantity(item.quantity)} | {item.unit} |")
        lines.append("")
        return lines

    def _grand_totals(self, result: AnalysisResult) -> List[str]:
        totals = result.grand_totals
        rows = [
            ("Materials", totals.materials),
            ("Labor", totals.labor),
            ("Equipment", totals.equipment),
            ("Subtotal", totals.subtotal),
            ("Contingency", totals.contingency),
            ("General Conditions", totals.general_conditions),
            ("Overhead & Profit", totals.overhead_profit),
        ]
        lines = ["## Grand Totals", ""]
        for label, value in rows:
            if value or label in ("Materials", "Subtotal"):
                lines.append(f"{label}: {_money(value)}")
        lines.append(f"**Total: {_money(totals.total)}**")
        lines.append("")
        return lines

    def _breakdowns(self, result: AnalysisResult) -> List[str]:
        if not result.breakdowns:
            return []
        lines = ["## Breakdowns", ""]
        for name, values in result.breakdowns.items():
            if not values:
                continue
            lines.append(f"### {name.replace('_', ' ').title()}")
            for label, value in values.items():
                lines.append(f"- {label}: {_quantity(value)}")
            lines.append("")
        return lines

    def _notes(self, result: AnalysisResult) -> List[str]:
        lines = ["## Notes", ""]
        lines.append(f"- Material quantities include a {result.waste_factor_pct:g}% waste factor")
        for note in result.installation_notes:
            lines.append(f"- [{note.priority.value}] {note.text}")
        for note in result.notes:
            lines.append(f"- {note.code.value}: {note.message}")
        lines.append("")
        return lines
