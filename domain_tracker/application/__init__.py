"""Application layer - ports, use cases and application exceptions."""
