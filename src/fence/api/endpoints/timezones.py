"""
Static list of IANA timezone names for profile editing
"""

from functools import lru_cache
from zoneinfo import available_timezones

from fastapi import APIRouter

router = APIRouter()

# tzdata entries that are not real zones
NON_GEOGRAPHIC = frozenset({"Factory", "localtime", "posixrules"})


@lru_cache
def all_timezones() -> list[str]:
    """Every selectable timezone name known to the tz database, sorted."""
    return sorted(name for name in available_timezones() if name not in NON_GEOGRAPHIC)


@router.get("/list/")
async def list_timezones() -> list[str]:
    return all_timezones()
