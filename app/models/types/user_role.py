from enum import Enum


class UserRole(str, Enum):
    """Application-wide user roles."""

    USER = "user"
    ADMIN = "admin"
