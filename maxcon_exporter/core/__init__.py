"""Core infrastructure: configuration, logging, errors, protocols and background services."""
