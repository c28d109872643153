"""Core utilities: errors, logging and runtime settings."""
