"""Core services for myls: paths, theme and configuration."""
