"""Command-line interface for Groot."""
