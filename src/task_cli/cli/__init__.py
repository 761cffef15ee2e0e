"""Command-line surface: registry, bootstrap and entrypoint."""
