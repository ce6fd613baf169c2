"""Versioned, framework-agnostic API layer."""
