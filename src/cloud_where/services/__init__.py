"""Query engine services."""
