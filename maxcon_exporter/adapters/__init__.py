"""Concrete implementations of the core protocols, each with an in-memory fake."""
