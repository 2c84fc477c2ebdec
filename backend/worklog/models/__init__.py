"""SQLAlchemy models exposed for table creation and imports."""
from .user import User, UserRole
from .work_update import WorkUpdate

__all__ = ["User", "UserRole", "WorkUpdate"]
