"""Reconcile per-page PDF table fragments into one typed layoff table."""

__version__ = "0.1.0"
