"""Infrastructure adapters for the ordering context."""
