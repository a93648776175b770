"""Parsing, layout, rendering and input handling."""
