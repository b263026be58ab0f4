"""
API routers.
"""

from . import auth, time_entries, users

__all__ = ["auth", "time_entries", "users"]
