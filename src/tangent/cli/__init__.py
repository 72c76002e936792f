"""Command line interface for Tangent."""
