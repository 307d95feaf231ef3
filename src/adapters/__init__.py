"""Concrete adapters for external tools."""
