"""Command-line interface for lssecrets."""
