"""
Access level resolution for subscription plans.

The storefront reads the plan level from several places (a configurable
``plan_level_configs`` table, built-in defaults, an explicit fallback).
These helpers take the already-fetched lookup results and pick the winner,
so no query logic lives here.
"""

from typing import Any, Callable, Iterable, List, Mapping, Optional, Union

from utils.logging import setup_logger

logger = setup_logger(__name__)

DEFAULT_ACCESS_LEVEL = 1

DEFAULT_LEVEL_CONFIGS: List[Mapping[str, Any]] = [
    {"plan_name": "free", "access_level": 1, "panel_type": "simple", "active": True},
    {"plan_name": "professional", "access_level": 2, "panel_type": "simple", "active": True},
    {"plan_name": "premium", "access_level": 3, "panel_type": "master", "active": True},
]

Source = Union[Any, Callable[[], Any]]


def resolve_first(sources: Iterable[Source], default: Any = None) -> Any:
    """
    Return the first source that yields a value other than None.

    Sources may be plain values or zero-argument callables; callables are
    only evaluated when every earlier source came up empty.
    """
    for source in sources:
        value = source() if callable(source) else source
        if value is not None:
            return value
    return default


def _level_from_configs(plan: str, level_configs: Optional[Iterable[Mapping[str, Any]]]) -> Optional[int]:
    if not level_configs:
        return None
    for level_config in level_configs:
        if level_config.get("plan_name") == plan and level_config.get("active", True):
            level = level_config.get("access_level")
            return int(level) if level is not None else None
    return None


def resolve_access_level(
    plan: Optional[str],
    level_configs: Optional[Iterable[Mapping[str, Any]]] = None,
    default: int = DEFAULT_ACCESS_LEVEL,
) -> int:
    """
    Resolve the access level (1-3) for a subscription plan.

    Precedence: an active entry from ``level_configs``, then the built-in
    defaults, then ``default``. A missing plan is treated as "free".
    """
    plan = plan or "free"
    level_configs = list(level_configs) if level_configs else None

    level = resolve_first(
        [
            lambda: _level_from_configs(plan, level_configs),
            lambda: _level_from_configs(plan, DEFAULT_LEVEL_CONFIGS),
        ],
        default=default,
    )
    logger.debug(f"Resolved access level {level} for plan '{plan}'")
    return level


def is_master_admin(has_admin_role: Optional[bool], is_profile_admin: Optional[bool]) -> bool:
    """A master admin needs both the admin role and the admin profile flag."""
    return bool(has_admin_role) and bool(is_profile_admin)
