"""Todo API — GraphQL task service over a single relational table."""

__version__ = "1.0.0"
