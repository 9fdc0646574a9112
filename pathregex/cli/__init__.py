"""Command line interface for pathregex."""
