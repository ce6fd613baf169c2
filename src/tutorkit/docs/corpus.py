"""Discovery and lazy parsing of the Markdown documents under a root."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from fnmatch import fnmatch
import logging
import os
from pathlib import Path

from tutorkit.config.defaults import DOCS_DEFAULTS
from tutorkit.docs.markdown import parse_document
from tutorkit.docs.models import Document
from tutorkit.errors import CorpusNotFoundError

logger = logging.getLogger(__name__)

MARKDOWN_SUFFIXES = frozenset({".md", ".markdown"})
INDEX_DOCUMENTS = ("README.md", "index.md")


def _is_excluded(relative: str, exclude: Iterable[str]) -> bool:
    for pattern in exclude:
        if fnmatch(relative, pattern) or fnmatch(relative, f"*/{pattern}"):
            return True
        if pattern.endswith("/**"):
            prefix = pattern[: -len("/**")]
            if relative == prefix or relative.startswith(f"{prefix}/"):
                return True
    return False


def discover_documents(
    root: Path,
    include: Sequence[str] | None = None,
    exclude: Sequence[str] | None = None,
) -> list[str]:
    """Return root-relative POSIX paths of the Markdown files to check."""
    root = Path(root).resolve()
    if not root.is_dir():
        raise CorpusNotFoundError(root)
    include = list(include) if include is not None else list(DOCS_DEFAULTS["include"])
    exclude = list(exclude) if exclude is not None else list(DOCS_DEFAULTS["exclude"])

    found: set[str] = set()
    for pattern in include:
        for path in root.glob(pattern):
            if not path.is_file():
                continue
            relative = path.relative_to(root).as_posix()
            if not _is_excluded(relative, exclude):
                found.add(relative)
    return sorted(found)


class Corpus:
    """The documents under ``root``; files outside the selection load on demand."""

    def __init__(self, root: Path, paths: Sequence[str]) -> None:
        self.root = Path(root).resolve()
        self.paths = tuple(paths)
        self._documents: dict[str, Document] = {}

    @classmethod
    def discover(
        cls,
        root: Path,
        include: Sequence[str] | None = None,
        exclude: Sequence[str] | None = None,
    ) -> Corpus:
        paths = discover_documents(root, include, exclude)
        logger.info("Discovered %d document(s) under %s", len(paths), root)
        return cls(root, paths)

    def __len__(self) -> int:
        return len(self.paths)

    def __iter__(self) -> Iterator[Document]:
        for relative in self.paths:
            yield self.get(relative)

    def __contains__(self, relative: object) -> bool:
        return relative in self.paths

    def get(self, relative: str) -> Document:
        """Return the parsed document at ``relative``, parsing it once."""
        document = self._documents.get(relative)
        if document is None:
            text = (self.root / relative).read_text(encoding="utf-8", errors="replace")
            document = parse_document(text, relative)
            self._documents[relative] = document
        return document

    def resolve(self, source: str, path_part: str) -> Path:
        """Resolve a link path written in ``source`` to an absolute path.

        A leading ``/`` is taken from the corpus root. The result is
        normalized but symlinks are not followed.
        """
        if path_part.startswith("/"):
            candidate = self.root / path_part.lstrip("/")
        else:
            candidate = (self.root / source).parent / path_part
        return Path(os.path.normpath(candidate))

    def document_path(self, path: Path) -> Path:
        """Map a directory to its README.md or index.md, when it has one."""
        if path.is_dir():
            for name in INDEX_DOCUMENTS:
                if (path / name).is_file():
                    return path / name
        return path

    def relative(self, path: Path) -> str | None:
        """Return the root-relative POSIX form of ``path``, or None if outside."""
        try:
            return path.relative_to(self.root).as_posix()
        except ValueError:
            return None

    @staticmethod
    def is_markdown(path: Path) -> bool:
        return path.suffix.lower() in MARKDOWN_SUFFIXES


__all__ = ["Corpus", "discover_documents", "INDEX_DOCUMENTS", "MARKDOWN_SUFFIXES"]
