"""Domain Tracker - registration and expiration lifecycle of domain names."""

__version__ = "1.0.0"
