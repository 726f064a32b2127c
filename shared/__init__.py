"""Shared types and utilities for the menu engine and API."""

from .types import EmptyState, TaxonomyMode

__all__ = ["TaxonomyMode", "EmptyState"]
