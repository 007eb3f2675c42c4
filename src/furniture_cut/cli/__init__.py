"""Command-line interface for furniture-cut."""
