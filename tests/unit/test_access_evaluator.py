"""Unit tests for AccessEvaluator."""

import pytest

from parish.domain.entities import MenuItem
from parish.domain.exceptions import PermissionDenied
from parish.domain.services import AccessDecision, AccessEvaluator
from parish.domain.value_objects import Module, Role
from parish.interfaces.api.menus import ADMIN_MENU, MEMBER_MENU


def test_admin_can_navigate_anywhere(access_evaluator: AccessEvaluator) -> None:
    for module in Module:
        decision = access_evaluator.can_navigate("admin", module)
        assert decision.allowed
        assert decision.reason is None


def test_manager_allowed_in_own_module(access_evaluator: AccessEvaluator) -> None:
    assert access_evaluator.can_navigate(Role.EVENTS_MANAGER, Module.EVENTS)


def test_manager_denied_with_reason(access_evaluator: AccessEvaluator) -> None:
    decision = access_evaluator.can_navigate("events_manager", Module.DONATIONS)
    assert not decision.allowed
    assert "Events Manager" in decision.reason
    assert "donations" in decision.reason


@pytest.mark.parametrize("role", [None, "", "   "])
def test_missing_role_denied(access_evaluator: AccessEvaluator, role) -> None:
    """No role never defaults to a privileged role."""
    decision = access_evaluator.can_navigate(role, Module.DASHBOARD)
    assert decision == AccessDecision.deny("Authentication required")


def test_unknown_role_denied(access_evaluator: AccessEvaluator) -> None:
    decision = access_evaluator.can_navigate(" pastor ", Module.DASHBOARD)
    assert not decision
    assert decision.reason == "Unrecognized role: pastor"


def test_whitespace_role_trimmed(access_evaluator: AccessEvaluator) -> None:
    assert access_evaluator.can_navigate(" finance_manager ", Module.DONATIONS).allowed


def test_no_module_denied(access_evaluator: AccessEvaluator) -> None:
    assert not access_evaluator.can_navigate("admin", "").allowed


def test_require_raises_permission_denied(access_evaluator: AccessEvaluator) -> None:
    with pytest.raises(PermissionDenied, match="members"):
        access_evaluator.require("finance_manager", Module.MEMBERS)
    access_evaluator.require("admin", Module.MEMBERS)


def test_filter_menu_preserves_order(access_evaluator: AccessEvaluator) -> None:
    items = access_evaluator.filter_menu("resource_manager", ADMIN_MENU)
    assert [i.module for i in items] == ["dashboard", "resources", "notifications", "settings"]


def test_filter_menu_admin_keeps_everything(access_evaluator: AccessEvaluator) -> None:
    assert access_evaluator.filter_menu("admin", ADMIN_MENU) == list(ADMIN_MENU)


def test_filter_menu_only_returns_accessible_items(access_evaluator: AccessEvaluator) -> None:
    registry = access_evaluator.registry
    for role in ["events_manager", "finance_manager", "content_manager", "member"]:
        for item in access_evaluator.filter_menu(role, ADMIN_MENU + MEMBER_MENU):
            assert registry.has_access(role, item.module)


def test_filter_menu_accepts_mappings(access_evaluator: AccessEvaluator) -> None:
    items = [
        {"module": "events", "path": "/admin/events", "label": "Events"},
        {"module": "members", "path": "/admin/members", "label": "Members"},
        {"path": "/nowhere", "label": "No module"},
        {"module": "dashboard", "path": "/admin/dashboard", "label": "Dashboard"},
    ]
    result = access_evaluator.filter_menu("events_manager", items)
    assert [i["label"] for i in result] == ["Events", "Dashboard"]


def test_filter_menu_does_not_mutate_input(access_evaluator: AccessEvaluator) -> None:
    items = [MenuItem("events", "/e", "Events"), MenuItem("members", "/m", "Members")]
    snapshot = list(items)
    access_evaluator.filter_menu("events_manager", items)
    assert items == snapshot


@pytest.mark.parametrize("role", [None, "", "Admin", "pastor"])
def test_filter_menu_denies_by_default(access_evaluator: AccessEvaluator, role) -> None:
    assert access_evaluator.filter_menu(role, ADMIN_MENU) == []


def test_member_portal_menu(access_evaluator: AccessEvaluator) -> None:
    items = access_evaluator.filter_menu("member", MEMBER_MENU)
    assert [i.path for i in items] == [
        "/member-portal/dashboard",
        "/member-portal/donate",
        "/member-portal/donation-history",
        "/member-portal/events",
    ]
