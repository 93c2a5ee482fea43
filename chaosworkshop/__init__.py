"""Workshop HTTP server core: submissions, users, tokens, cached listings and routing."""

__version__ = "0.1.0"