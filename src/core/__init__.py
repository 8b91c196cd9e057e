"""Core: configuration, domain model and validation services."""
