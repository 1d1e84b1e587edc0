"""Profile domain: display levels, the profile record and updates."""

from .display import Display, InvalidScope, parse_scope
from .model import Profile, StandardAttributeString
from .signing import SecretStore
from .update import AttributeUpdate, ProfileUpdate, ProfileUpdateError, apply_update

__all__ = [
    "Display",
    "InvalidScope",
    "parse_scope",
    "Profile",
    "StandardAttributeString",
    "SecretStore",
    "AttributeUpdate",
    "ProfileUpdate",
    "ProfileUpdateError",
    "apply_update",
]
