"""In-memory blog backend: stores, resolvers, subscriptions and sample data."""

__version__ = "0.1.0"