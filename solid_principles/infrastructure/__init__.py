"""Infrastructure layer - logging, persistence and registries."""
