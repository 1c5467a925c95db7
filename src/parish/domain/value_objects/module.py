"""Feature areas subject to role gating."""

from enum import StrEnum


class Module(StrEnum):
    """Administrative and member-portal modules."""

    DASHBOARD = "dashboard"
    MEMBERS = "members"
    EVENTS = "events"
    DONATIONS = "donations"
    RESOURCES = "resources"
    TESTIMONIALS = "testimonials"
    NOTIFICATIONS = "notifications"
    USER_MANAGEMENT = "user_management"
    SETTINGS = "settings"
    PORTAL_DASHBOARD = "portal_dashboard"
    PORTAL_DONATE = "portal_donate"
    PORTAL_DONATION_HISTORY = "portal_donation_history"
    PORTAL_EVENTS = "portal_events"
