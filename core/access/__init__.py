"""
Plan access level resolution.
"""

from core.access.levels import is_master_admin, resolve_access_level, resolve_first

__all__ = ["is_master_admin", "resolve_access_level", "resolve_first"]
