"""Documentation integrity checks for the tutorial corpus."""

from __future__ import annotations

from .checker import check_corpus, check_with_settings
from .corpus import Corpus, discover_documents
from .markdown import parse_document, slugify
from .models import CheckIssue, CheckReport, Document, Heading, Link, NavigationEdge
from .report import render

__all__ = [
    "check_corpus",
    "check_with_settings",
    "Corpus",
    "discover_documents",
    "parse_document",
    "slugify",
    "CheckIssue",
    "CheckReport",
    "Document",
    "Heading",
    "Link",
    "NavigationEdge",
    "render",
]
