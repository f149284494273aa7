"""Command-line tools for Ask-AI."""
