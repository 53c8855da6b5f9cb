"""Command line interface for inspecting paths."""
