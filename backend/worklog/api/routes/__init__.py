"""Route modules for the work log API."""
from . import auth, users, work_updates

__all__ = ["auth", "users", "work_updates"]
