"""Parse TOML documents into a position-aware syntax tree, one expression at a time."""

__version__ = "0.1.0"

__all__ = ["ast", "builder", "errors", "kind", "parser", "scanner", "textvalues"]