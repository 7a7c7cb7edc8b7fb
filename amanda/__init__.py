"""Amanda Search: a thin Google Custom Search client."""

__version__ = "2.0.0"
