"""Netflix Analyzer - catalog queries over the Netflix titles export."""

__version__ = "0.1.0"
