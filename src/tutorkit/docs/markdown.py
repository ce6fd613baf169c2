"""Line-oriented Markdown scanning for links, headings and anchors.

Only the constructs needed for link checking are recognized: inline links and
images, reference definitions, ATX and setext headings, and explicit HTML
anchors. Fenced code blocks, inline code spans, HTML comments and YAML front
matter are skipped.
"""

from __future__ import annotations

import re
from urllib.parse import unquote

from tutorkit.docs.models import Document, Heading, Link
from tutorkit.enums import NavigationDirection

_FENCE_RE = re.compile(r"^ {0,3}(`{3,}|~{3,})")
_CODE_SPAN_RE = re.compile(r"(`+)(.+?)\1")
_COMMENT_RE = re.compile(r"<!--.*?-->")
_INLINE_LINK_RE = re.compile(
    r"(?P<bang>!?)\[(?P<text>(?:[^\[\]]|\[[^\[\]]*\])*)\]"
    r"\(\s*(?P<target><[^<>\n]*>|[^\s()<>]*(?:\([^\s()]*\)[^\s()<>]*)*)"
    r"(?:\s+(?:\"[^\"]*\"|'[^']*'|\([^()]*\)))?\s*\)"
)
_REFERENCE_DEF_RE = re.compile(r"^ {0,3}\[(?P<label>[^\]^][^\]]*)\]:\s*(?P<target><[^>]*>|\S+)")
_ATX_RE = re.compile(r"^ {0,3}(#{1,6})(?:[ \t]+(.*?))?(?:[ \t]+#+)?[ \t]*$")
_SETEXT_RE = re.compile(r"^ {0,3}(=+|-+)[ \t]*$")
_HTML_ANCHOR_RE = re.compile(
    r"<[a-zA-Z][^>]*?\s(?:name|id)\s*=\s*[\"']([^\"']+)[\"']", re.IGNORECASE
)
_HTML_TAG_RE = re.compile(r"<[^>]+>")
_SCHEME_RE = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.\-]*:")
_LEADING_DECORATION_RE = re.compile(r"^[\W_]+")
_NAV_KEYWORD_RE = re.compile(
    r"(next|back|previous|prev)\b"
    r"(?=\s*(?:$|[:|>\]*_(\[\u2192\u00bb\u2013\u2014-]|to\b|up\b|chapter\b|page\b|lesson\b|step\b))",
    re.IGNORECASE,
)
_SLUG_DROP_RE = re.compile(r"[^\w\- ]")


def strip_inline_markup(text: str) -> str:
    """Reduce heading text to what a renderer displays."""
    text = _INLINE_LINK_RE.sub(lambda m: m.group("text"), text)
    text = _HTML_TAG_RE.sub("", text)
    return text.replace("`", "")


def slugify(text: str) -> str:
    """GitHub-style anchor slug for a heading."""
    slug = strip_inline_markup(text).strip().lower()
    slug = _SLUG_DROP_RE.sub("", slug)
    return slug.replace(" ", "-")


def navigation_direction(text: str, prefix: str = "") -> NavigationDirection | None:
    """Classify a link as Next/Back navigation from its text or lead-in."""
    for candidate in (text, prefix):
        stripped = _LEADING_DECORATION_RE.sub("", candidate)
        match = _NAV_KEYWORD_RE.match(stripped)
        if match:
            if match.group(1).lower() == "next":
                return NavigationDirection.NEXT
            return NavigationDirection.BACK
    return None


def _mask(pattern: re.Pattern[str], line: str) -> str:
    return pattern.sub(lambda m: " " * len(m.group(0)), line)


def make_link(
    source: str,
    line: int,
    text: str,
    target: str,
    *,
    image: bool = False,
    navigation: NavigationDirection | None = None,
) -> Link:
    raw = target.strip()
    if raw.startswith("<") and raw.endswith(">"):
        raw = raw[1:-1].strip()
    external = bool(_SCHEME_RE.match(raw)) or raw.startswith("//")
    if external:
        return Link(
            source=source, line=line, text=text, target=raw, external=True, image=image
        )
    path_part, has_anchor, anchor = raw.partition("#")
    path_part = unquote(path_part.split("?", 1)[0])
    return Link(
        source=source,
        line=line,
        text=text,
        target=raw,
        path=path_part,
        anchor=unquote(anchor) if has_anchor else None,
        image=image,
        navigation=navigation,
    )


def scan_links(line: str, lineno: int, source: str) -> list[Link]:
    """Return the links written on one (code-masked) line."""
    found: list[Link] = []
    cursor = 0
    # a keyword carries over to later links on the line until another one appears
    direction: NavigationDirection | None = None
    for match in _INLINE_LINK_RE.finditer(line):
        prefix = line[cursor : match.start()]
        cursor = match.end()
        text = match.group("text")
        direction = navigation_direction(text, prefix) or direction
        found.append(
            make_link(
                source,
                lineno,
                text,
                match.group("target"),
                image=bool(match.group("bang")),
                navigation=direction,
            )
        )
        # badges: [![alt](image.svg)](target.md)
        for inner in _INLINE_LINK_RE.finditer(text):
            found.append(
                make_link(
                    source,
                    lineno,
                    inner.group("text"),
                    inner.group("target"),
                    image=bool(inner.group("bang")),
                )
            )
    reference = _REFERENCE_DEF_RE.match(line)
    if reference:
        found.append(
            make_link(source, lineno, reference.group("label"), reference.group("target"))
        )
    return found


def _skip_front_matter(lines: list[str]) -> int:
    if not lines or lines[0].strip() != "---":
        return 0
    for index, line in enumerate(lines[1:], start=1):
        if line.strip() in {"---", "..."}:
            return index + 1
    return 0


def parse_document(text: str, path: str) -> Document:
    """Scan Markdown ``text`` belonging to the document at ``path``."""
    lines = text.splitlines()
    links: list[Link] = []
    headings: list[Heading] = []
    anchors: set[str] = set()
    slug_counts: dict[str, int] = {}

    def add_heading(level: int, heading_text: str, lineno: int) -> None:
        heading_text = heading_text.strip()
        base = slugify(heading_text)
        count = slug_counts.get(base, 0)
        slug_counts[base] = count + 1
        slug = base if count == 0 else f"{base}-{count}"
        headings.append(Heading(level=level, text=heading_text, slug=slug, line=lineno))

    fence: str | None = None
    paragraph: tuple[str, int] | None = None
    in_comment = False
    start = _skip_front_matter(lines)

    for lineno, raw_line in enumerate(lines[start:], start=start + 1):
        fence_match = _FENCE_RE.match(raw_line)
        if fence is not None:
            if (
                fence_match
                and fence_match.group(1)[0] == fence[0]
                and len(fence_match.group(1)) >= len(fence)
                and not raw_line.strip().lstrip(fence[0])
            ):
                fence = None
            paragraph = None
            continue
        if fence_match:
            fence = fence_match.group(1)
            paragraph = None
            continue

        line = _mask(_COMMENT_RE, raw_line)
        if in_comment:
            if "-->" not in line:
                continue
            in_comment = False
            line = " " * (line.index("-->") + 3) + line[line.index("-->") + 3 :]
        if "<!--" in line:
            in_comment = True
            line = line[: line.index("<!--")]
        visible = line
        line = _mask(_CODE_SPAN_RE, visible)

        atx = _ATX_RE.match(visible)
        if atx:
            add_heading(len(atx.group(1)), atx.group(2) or "", lineno)
            paragraph = None
        elif paragraph is not None and _SETEXT_RE.match(line):
            level = 1 if line.strip().startswith("=") else 2
            add_heading(level, paragraph[0], paragraph[1])
            paragraph = None
            continue
        else:
            paragraph = (visible, lineno) if line.strip() else None

        anchors.update(_HTML_ANCHOR_RE.findall(line))
        links.extend(scan_links(line, lineno, path))

    return Document(
        path=path,
        links=tuple(links),
        headings=tuple(headings),
        explicit_anchors=frozenset(anchors),
    )


__all__ = [
    "make_link",
    "navigation_direction",
    "parse_document",
    "scan_links",
    "slugify",
    "strip_inline_markup",
]
