"""Secret Service client backends."""
