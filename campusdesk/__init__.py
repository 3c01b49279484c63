"""In-memory model of a university campus: users, courses, grades, attendance and events."""

__version__ = "0.1.0"
__all__ = ["records", "users", "cli"]