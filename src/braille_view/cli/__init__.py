"""Command line viewer."""
