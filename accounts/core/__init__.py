"""Core layer: configuration, constants, Result types, errors and the container."""
