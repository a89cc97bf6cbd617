"""
API routers.
"""

from . import clients, dashboard, projects, tasks

__all__ = ["clients", "dashboard", "projects", "tasks"]
