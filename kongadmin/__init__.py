"""Client for the Kong Admin API: entities, paging, errors, listeners and runtime information."""

__version__ = "0.1.0"