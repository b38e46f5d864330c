"""Command line interface for the issues API."""
