"""Falcon before-hooks."""

from calshare.interfaces.api.hooks.permission_guard import PermissionGuard, require_permission

__all__ = ["PermissionGuard", "require_permission"]
