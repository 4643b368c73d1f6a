"""Region catalog storage and loading."""
