"""Persistence implementations for content objects."""
