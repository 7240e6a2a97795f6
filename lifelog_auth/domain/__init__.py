"""Domain layer: entities, value objects, error constants and ports."""
