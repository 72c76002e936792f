"""Shared utilities for Tangent."""
