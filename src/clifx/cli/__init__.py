"""Command-line interface for clifx."""
