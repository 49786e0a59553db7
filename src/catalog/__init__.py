"""Library catalog: books, authors and genres over HTML and JSON."""

__version__ = "0.1.0"
