"""Configuration: TOML discovery, pydantic models, settings, and logging."""
