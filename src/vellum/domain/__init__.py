"""Vellum domain layer."""
