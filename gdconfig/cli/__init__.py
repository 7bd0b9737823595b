"""Command implementations for the gdconfig CLI."""
