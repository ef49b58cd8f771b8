"""Report generation: recommendations, JSON and Markdown output."""

from __future__ import annotations

import json
from pathlib import Path

from printcheck.models import OptimizationIssues


def recommendations(issues: OptimizationIssues) -> list[str]:
    """Return one human-readable recommendation per issue found."""
    out: list[str] = []
    if issues.has_color_content:
        out.append(
            "Colored content found. Printing in grayscale will save color toner."
        )
    if issues.has_background_elements:
        out.append(
            "Large background elements found. Removing backgrounds will save ink."
        )
    if issues.has_large_images:
        out.append(
            "Large images found. Downsampling images will speed up printing."
        )
    return out


def report_data(issues: OptimizationIssues, source: Path | None = None) -> dict:
    data = issues.to_dict()
    if source is not None:
        data["source_path"] = str(source)
    data["recommendations"] = recommendations(issues)
    return data


def write_json_report(issues: OptimizationIssues, source: Path, output: Path) -> None:
    """Write an analysis result as a JSON report."""
    data = report_data(issues, source)
    output.write_text(json.dumps(data, indent=2), encoding="utf-8")


def write_markdown_report(issues: OptimizationIssues, source: Path, output: Path) -> None:
    """Write an analysis result as a Markdown report."""

    def yes_no(flag: bool) -> str:
        return "Yes" if flag else "No"

    lines: list[str] = [
        f"# Print Optimization Report: {source.name}",
        "",
        f"- **Pages:** {issues.page_count}",
        f"- **Color content:** {yes_no(issues.has_color_content)}",
        f"- **Background elements:** {yes_no(issues.has_background_elements)}",
        f"- **Large images:** {yes_no(issues.has_large_images)}",
        "",
        "_Only the first page is inspected._",
        "",
    ]

    recs = recommendations(issues)
    if recs:
        lines.append("## Recommendations")
        lines.append("")
        lines.extend(f"- {rec}" for rec in recs)
    else:
        lines.append("No optimization needed before printing.")

    lines.append("")
    output.write_text("\n".join(lines), encoding="utf-8")


def write_report(
    issues: OptimizationIssues, source: Path, output: Path, report_format: str
) -> None:
    if report_format == "json":
        write_json_report(issues, source, output)
    elif report_format == "markdown":
        write_markdown_report(issues, source, output)
    else:
        raise ValueError(f"Unknown report format: {report_format}")
