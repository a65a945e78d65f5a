"""formguard — declarative validation for application form input."""

__version__ = "1.0.0"
