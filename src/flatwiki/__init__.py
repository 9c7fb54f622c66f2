"""FlatWiki: a small wiki that keeps each page in a flat file."""

__version__ = "0.1.0"
