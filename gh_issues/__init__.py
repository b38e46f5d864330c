"""Typed async client for the GitHub Issues REST API."""

__version__ = "0.1.0"
