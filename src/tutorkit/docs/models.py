"""Records produced while scanning and checking the documentation corpus."""

from __future__ import annotations

from pydantic import Field, computed_field

from tutorkit.enums import IssueKind, NavigationDirection
from tutorkit.schema.base import FrozenModel, TypedBaseModel


class Link(FrozenModel):
    """One link occurrence inside a document."""

    source: str = Field(..., description="Linking document, relative to the root")
    line: int = Field(..., ge=1)
    text: str = ""
    target: str = Field(..., description="Raw link destination as written")
    path: str = Field("", description="Decoded path part of the destination")
    anchor: str | None = None
    external: bool = False
    image: bool = False
    navigation: NavigationDirection | None = None


class Heading(FrozenModel):
    level: int = Field(..., ge=1, le=6)
    text: str
    slug: str
    line: int = Field(..., ge=1)


class Document(FrozenModel):
    """A parsed Markdown file."""

    path: str
    links: tuple[Link, ...] = ()
    headings: tuple[Heading, ...] = ()
    explicit_anchors: frozenset[str] = frozenset()

    @property
    def anchors(self) -> frozenset[str]:
        """Every fragment a link may target in this document, lowercased."""
        slugs = {heading.slug for heading in self.headings}
        return frozenset(slugs | {anchor.lower() for anchor in self.explicit_anchors})

    @property
    def navigation_links(self) -> tuple[Link, ...]:
        return tuple(
            link
            for link in self.links
            if link.navigation is not None and not link.external and link.path
        )


class NavigationEdge(FrozenModel):
    source: str
    target: str
    direction: NavigationDirection
    line: int = Field(..., ge=1)


class CheckIssue(FrozenModel):
    """A single problem found in the corpus."""

    kind: IssueKind
    source: str
    line: int | None = None
    target: str | None = None
    message: str

    def sort_key(self) -> tuple[str, int, str, str]:
        return (self.source, self.line or 0, self.kind.value, self.target or "")


class CheckReport(TypedBaseModel):
    """Outcome of checking a documentation corpus."""

    root: str
    documents_checked: int = Field(0, ge=0)
    links_checked: int = Field(0, ge=0)
    navigation_edges_checked: int = Field(0, ge=0)
    issues: list[CheckIssue] = Field(default_factory=list)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def ok(self) -> bool:
        return not self.issues


__all__ = [
    "Link",
    "Heading",
    "Document",
    "NavigationEdge",
    "CheckIssue",
    "CheckReport",
]
