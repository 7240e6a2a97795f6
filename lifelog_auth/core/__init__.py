"""Core package: configuration, result types and dependency wiring."""
