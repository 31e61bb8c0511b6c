"""Packaged data files (manifest template)."""
