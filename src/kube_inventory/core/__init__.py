"""Core framework: configuration and plugin system."""
