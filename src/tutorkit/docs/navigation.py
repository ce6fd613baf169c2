"""Next/Back navigation: reciprocity and connectivity of the traversal graph."""

from __future__ import annotations

from collections import defaultdict, deque
import logging

from tutorkit.docs.corpus import Corpus
from tutorkit.docs.models import CheckIssue, Document, NavigationEdge
from tutorkit.enums import IssueKind, NavigationDirection

logger = logging.getLogger(__name__)


def collect_edges(corpus: Corpus) -> tuple[list[NavigationEdge], list[CheckIssue]]:
    """Resolve navigation links to edges; unresolvable ones are dangling ends."""
    edges: list[NavigationEdge] = []
    issues: list[CheckIssue] = []
    for document in corpus:
        for link in document.navigation_links:
            if link.navigation is None:
                continue
            resolved = corpus.document_path(corpus.resolve(document.path, link.path))
            relative = corpus.relative(resolved)
            if relative is None or not resolved.is_file():
                issues.append(
                    CheckIssue(
                        kind=IssueKind.NAV_DANGLING,
                        source=document.path,
                        line=link.line,
                        target=link.target,
                        message=(
                            f"{link.navigation.value} link points to "
                            f"'{link.path}', which is not a document"
                        ),
                    )
                )
                continue
            if not corpus.is_markdown(resolved) or relative == document.path:
                continue
            edges.append(
                NavigationEdge(
                    source=document.path,
                    target=relative,
                    direction=link.navigation,
                    line=link.line,
                )
            )
    return edges, issues


def _links_back(
    corpus: Corpus,
    target: Document,
    source: str,
    direction: NavigationDirection | None,
) -> bool:
    for link in target.links:
        if link.external or not link.path:
            continue
        if direction is not None and link.navigation is not direction:
            continue
        resolved = corpus.document_path(corpus.resolve(target.path, link.path))
        if corpus.relative(resolved) == source:
            return True
    return False


def check_reciprocity(
    corpus: Corpus,
    edges: list[NavigationEdge],
    strict: bool = False,
) -> list[CheckIssue]:
    """Every document a navigation link points to must link back.

    In strict mode the link back must itself be navigation in the opposite
    direction (a Next answered by a Back and vice versa).
    """
    issues: list[CheckIssue] = []
    for edge in edges:
        target = corpus.get(edge.target)
        expected = edge.direction.opposite if strict else None
        if _links_back(corpus, target, edge.source, expected):
            continue
        wanted = f"a {expected.value} link" if expected else "a link"
        issues.append(
            CheckIssue(
                kind=IssueKind.NAV_NOT_RECIPROCATED,
                source=edge.source,
                line=edge.line,
                target=edge.target,
                message=(
                    f"{edge.direction.value} link to {edge.target} is not answered "
                    f"by {wanted} back to {edge.source}"
                ),
            )
        )
    return issues


def entry_document(edges: list[NavigationEdge]) -> str | None:
    """The document a reader starts from: one with Next but no Back links."""
    if not edges:
        return None
    outgoing: dict[str, set[NavigationDirection]] = defaultdict(set)
    nodes: set[str] = set()
    for edge in edges:
        outgoing[edge.source].add(edge.direction)
        nodes.update((edge.source, edge.target))
    starts = sorted(
        node
        for node in nodes
        if NavigationDirection.NEXT in outgoing[node]
        and NavigationDirection.BACK not in outgoing[node]
    )
    return starts[0] if starts else min(nodes)


def connected_components(edges: list[NavigationEdge]) -> list[list[str]]:
    """Components of the undirected navigation graph, each sorted."""
    adjacency: dict[str, set[str]] = defaultdict(set)
    for edge in edges:
        adjacency[edge.source].add(edge.target)
        adjacency[edge.target].add(edge.source)
    seen: set[str] = set()
    components: list[list[str]] = []
    for node in sorted(adjacency):
        if node in seen:
            continue
        component: list[str] = []
        queue = deque([node])
        seen.add(node)
        while queue:
            current = queue.popleft()
            component.append(current)
            for neighbour in adjacency[current]:
                if neighbour not in seen:
                    seen.add(neighbour)
                    queue.append(neighbour)
        components.append(sorted(component))
    return components


def check_connectivity(edges: list[NavigationEdge]) -> list[CheckIssue]:
    """Report navigation components not reachable from the entry document."""
    entry = entry_document(edges)
    if entry is None:
        return []
    issues: list[CheckIssue] = []
    for component in connected_components(edges):
        if entry in component:
            continue
        issues.append(
            CheckIssue(
                kind=IssueKind.NAV_DISCONNECTED,
                source=component[0],
                target=entry,
                message=(
                    "navigation chain is not connected to "
                    f"{entry}: {', '.join(component)}"
                ),
            )
        )
    return issues


def check_navigation(
    corpus: Corpus, strict: bool = False
) -> tuple[list[CheckIssue], int]:
    """Run all navigation checks; return issues and the number of edges."""
    edges, issues = collect_edges(corpus)
    issues.extend(check_reciprocity(corpus, edges, strict=strict))
    issues.extend(check_connectivity(edges))
    logger.debug("Checked %d navigation edge(s)", len(edges))
    return issues, len(edges)


__all__ = [
    "collect_edges",
    "check_reciprocity",
    "check_connectivity",
    "check_navigation",
    "connected_components",
    "entry_document",
]
