"""Core building blocks for textops."""
