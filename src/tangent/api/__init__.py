"""HTTP command bridge for Tangent."""
