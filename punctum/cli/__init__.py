"""Command-line interface for inspecting punctuation declarations."""
