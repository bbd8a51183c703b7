"""Core package for PropStore - configuration."""
