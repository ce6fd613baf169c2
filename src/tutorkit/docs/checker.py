"""Entry points for checking a documentation corpus."""

from __future__ import annotations

from collections.abc import Sequence
import logging
from pathlib import Path

from tutorkit.config.settings import DocsSettings
from tutorkit.docs.corpus import Corpus
from tutorkit.docs.links import check_links
from tutorkit.docs.models import CheckReport
from tutorkit.docs.navigation import check_navigation

logger = logging.getLogger(__name__)


def check_corpus(
    root: str | Path,
    include: Sequence[str] | None = None,
    exclude: Sequence[str] | None = None,
    check_anchors: bool = True,
    strict_navigation: bool = False,
) -> CheckReport:
    """Check links and navigation of the Markdown documents under ``root``.

    Raises :class:`~tutorkit.errors.CorpusNotFoundError` when ``root`` is not
    a directory.
    """
    corpus = Corpus.discover(Path(root), include, exclude)
    link_issues, links_checked = check_links(corpus, check_anchors=check_anchors)
    nav_issues, edges_checked = check_navigation(corpus, strict=strict_navigation)
    issues = sorted(link_issues + nav_issues, key=lambda issue: issue.sort_key())
    report = CheckReport(
        root=str(corpus.root),
        documents_checked=len(corpus),
        links_checked=links_checked,
        navigation_edges_checked=edges_checked,
        issues=issues,
    )
    if report.ok:
        logger.info(
            "Documentation check passed: %d document(s), %d link(s)",
            report.documents_checked,
            report.links_checked,
        )
    else:
        logger.warning("Documentation check found %d issue(s)", len(issues))
    return report


def check_with_settings(settings: DocsSettings) -> CheckReport:
    return check_corpus(
        settings.root,
        include=settings.include,
        exclude=settings.exclude,
        check_anchors=settings.check_anchors,
        strict_navigation=settings.strict_navigation,
    )


__all__ = ["check_corpus", "check_with_settings"]
