"""Command-line helpers for tutorkit."""
