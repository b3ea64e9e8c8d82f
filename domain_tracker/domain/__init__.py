"""Domain layer - entities, value objects and stateless services."""
