"""Domain layer - catalog and metadata business logic."""
