"""GUI resources."""
