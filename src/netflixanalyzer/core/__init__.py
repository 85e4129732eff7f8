"""Catalog loading, analysis and lookup."""
