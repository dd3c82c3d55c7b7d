"""Infrastructure layer - adapters for persistence and messaging."""
