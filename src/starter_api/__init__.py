"""Starter API: a backend service scaffold."""

__version__ = "0.1.0"
