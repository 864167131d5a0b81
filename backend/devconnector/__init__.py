"""DevConnector - developer profiles, posts and token authentication API."""

__version__ = "1.0.0"
