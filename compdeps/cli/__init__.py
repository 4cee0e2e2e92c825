"""Command implementations for the compdeps CLI."""
