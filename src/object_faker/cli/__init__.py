"""Command line interface for object-faker."""
