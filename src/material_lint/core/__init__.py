"""Core linting components."""
