"""Data models for Netflix Analyzer."""

from netflixanalyzer.models.diagnostic import LoadDiagnostic, LoadResult
from netflixanalyzer.models.title import Kind, Title

__all__ = ["Kind", "LoadDiagnostic", "LoadResult", "Title"]
