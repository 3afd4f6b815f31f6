"""Command line interface for jsonrest."""
