"""Validation schemas for raw catalog data."""
