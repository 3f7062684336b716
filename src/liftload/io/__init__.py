"""Read-only input layer: history files and JSON conversion."""
