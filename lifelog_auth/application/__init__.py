"""Application layer: services orchestrating domain ports."""
