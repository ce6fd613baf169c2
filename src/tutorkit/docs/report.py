"""Human and machine renderings of a :class:`CheckReport`."""

from __future__ import annotations

from tutorkit.docs.models import CheckReport
from tutorkit.enums import OutputFormat


def render_text(report: CheckReport) -> str:
    lines = [
        f"{issue.source}:{issue.line}: [{issue.kind.value}] {issue.message}"
        if issue.line
        else f"{issue.source}: [{issue.kind.value}] {issue.message}"
        for issue in report.issues
    ]
    status = "OK" if report.ok else f"{len(report.issues)} issue(s)"
    lines.append(
        f"{status}: {report.documents_checked} document(s), "
        f"{report.links_checked} link(s), "
        f"{report.navigation_edges_checked} navigation edge(s) checked"
    )
    return "\n".join(lines)


def render_json(report: CheckReport) -> str:
    return report.model_dump_json(indent=2)


def render(report: CheckReport, output_format: OutputFormat = OutputFormat.TEXT) -> str:
    if OutputFormat(output_format) is OutputFormat.JSON:
        return render_json(report)
    return render_text(report)


__all__ = ["render", "render_json", "render_text"]
