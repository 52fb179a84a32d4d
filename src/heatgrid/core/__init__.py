"""Data sources, value mappings and colour gradients."""
