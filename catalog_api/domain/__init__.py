"""Domain layer: entities, repository contracts, field constants and errors."""
