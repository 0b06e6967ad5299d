"""Exporter for the effective max_connections of RDS PostgreSQL instances."""

__version__ = "0.1.0"
