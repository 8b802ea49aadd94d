"""FileFinder: name-prefix and size-range file indexing."""

__version__ = "0.1.0"
