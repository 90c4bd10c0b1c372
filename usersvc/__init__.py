"""usersvc: users HTTP service backed by MongoDB."""

__version__ = "1.0.0"
