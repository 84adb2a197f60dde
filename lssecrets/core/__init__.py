"""Core traversal, formatting and error handling for lssecrets."""
