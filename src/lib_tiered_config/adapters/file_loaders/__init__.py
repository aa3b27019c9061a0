"""Structured file loader adapters."""
