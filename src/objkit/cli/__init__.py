"""Command-line interface for objkit."""
