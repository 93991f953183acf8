"""Configuration, exceptions and input validators."""
