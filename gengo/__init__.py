"""Building blocks for Go code generators: a type model, namers, ordering, import tracking and comment tags."""

__version__ = "0.1.0"