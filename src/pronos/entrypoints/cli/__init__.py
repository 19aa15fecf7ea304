"""PRONOS command-line interface."""
