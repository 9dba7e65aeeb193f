"""Command line tools for Wine Collection."""
