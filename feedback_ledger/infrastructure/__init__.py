"""Infrastructure layer: observability, monitoring and in-memory adapters."""
