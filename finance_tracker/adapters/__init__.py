"""Adapters package (CLIs and user interfaces)."""
