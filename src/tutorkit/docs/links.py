"""Relative link and anchor resolution."""

from __future__ import annotations

import logging

from tutorkit.docs.corpus import Corpus
from tutorkit.docs.models import CheckIssue, Document, Link
from tutorkit.enums import IssueKind

logger = logging.getLogger(__name__)


def _issue(kind: IssueKind, link: Link, message: str) -> CheckIssue:
    return CheckIssue(
        kind=kind,
        source=link.source,
        line=link.line,
        target=link.target,
        message=message,
    )


def check_link(corpus: Corpus, link: Link, check_anchors: bool = True) -> CheckIssue | None:
    """Return the problem with one relative link, or None when it resolves."""
    if not link.path:
        if link.anchor is None:
            return _issue(IssueKind.BROKEN_LINK, link, "link has an empty target")
        if check_anchors:
            return _check_anchor(corpus.get(link.source), link)
        return None

    resolved = corpus.resolve(link.source, link.path)
    relative = corpus.relative(resolved)
    if relative is None:
        return _issue(
            IssueKind.OUTSIDE_ROOT,
            link,
            f"'{link.path}' resolves outside the documentation root",
        )
    if not resolved.exists():
        return _issue(
            IssueKind.BROKEN_LINK,
            link,
            f"'{link.path}' does not exist (resolved to {relative})",
        )
    resolved = corpus.document_path(resolved)
    if link.navigation is not None and not resolved.is_file():
        return _issue(
            IssueKind.BROKEN_LINK,
            link,
            f"'{link.path}' is a directory without README.md or index.md",
        )
    if (
        check_anchors
        and link.anchor
        and resolved.is_file()
        and corpus.is_markdown(resolved)
    ):
        return _check_anchor(corpus.get(corpus.relative(resolved) or relative), link)
    return None


def _check_anchor(target: Document, link: Link) -> CheckIssue | None:
    if not link.anchor or link.anchor.lower() in target.anchors:
        return None
    return _issue(
        IssueKind.MISSING_ANCHOR,
        link,
        f"'#{link.anchor}' is not a heading or anchor in {target.path}",
    )


def check_links(corpus: Corpus, check_anchors: bool = True) -> tuple[list[CheckIssue], int]:
    """Check every relative link in the corpus.

    Returns the issues found and the number of links examined.
    """
    issues: list[CheckIssue] = []
    checked = 0
    for document in corpus:
        for link in document.links:
            if link.external:
                continue
            checked += 1
            issue = check_link(corpus, link, check_anchors)
            if issue is not None:
                logger.debug("%s:%d %s", issue.source, issue.line or 0, issue.message)
                issues.append(issue)
    return issues, checked


__all__ = ["check_link", "check_links"]
