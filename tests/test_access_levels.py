import pytest

from core.access import (
    is_master_admin,
    resolve_access_level,
    resolve_first,
)


def test_configured_level_wins_over_defaults():
    configs = [{"plan_name": "professional", "access_level": 3, "active": True}]
    assert resolve_access_level("professional", configs) == 3


def test_inactive_config_falls_back_to_defaults():
    configs = [{"plan_name": "premium", "access_level": 1, "active": False}]
    assert resolve_access_level("premium", configs) == 3


@pytest.mark.parametrize(
    "plan, expected",
    [("free", 1), ("professional", 2), ("premium", 3), (None, 1), ("enterprise", 1)],
)
def test_default_levels(plan, expected):
    assert resolve_access_level(plan) == expected


def test_unknown_plan_uses_explicit_default():
    assert resolve_access_level("enterprise", default=2) == 2


def test_resolve_first_evaluates_sources_lazily():
    calls = []

    def second():
        calls.append("second")
        return "b"

    def third():
        calls.append("third")
        return "c"

    assert resolve_first([None, second, third], default="z") == "b"
    assert calls == ["second"]
    assert resolve_first([lambda: None, None], default="z") == "z"


def test_master_admin_needs_both_flags():
    assert is_master_admin(True, True)
    assert not is_master_admin(True, False)
    assert not is_master_admin(None, True)
