"""
Roles API area.
"""
from .models import Role, RoleEvent, RoleList, RoleType
from .operations import Roles

__all__ = ["Role", "RoleEvent", "RoleList", "RoleType", "Roles"]
