"""Infrastructure layer - logging, error handling and the concept registry."""
