"""Configuration loading for the core model."""
