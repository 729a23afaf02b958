"""Command-line interface for sway-scratch."""
