"""Navigation menus served to the admin dashboard and member portal."""

from parish.domain.entities import MenuItem
from parish.domain.value_objects import Module

ADMIN_MENU: tuple[MenuItem, ...] = (
    MenuItem(Module.DASHBOARD, "/admin/dashboard", "Dashboard", "📊"),
    MenuItem(Module.MEMBERS, "/admin/members", "Members", "👥"),
    MenuItem(Module.EVENTS, "/admin/events", "Events", "📅"),
    MenuItem(Module.DONATIONS, "/admin/donations", "Donations", "💰"),
    MenuItem(Module.RESOURCES, "/admin/resources", "Resources", "📚"),
    MenuItem(Module.TESTIMONIALS, "/admin/testimonials", "Testimonials", "💬"),
    MenuItem(Module.NOTIFICATIONS, "/admin/notifications", "Notifications", "🔔"),
    MenuItem(Module.USER_MANAGEMENT, "/admin/users", "User Management", "👤"),
    MenuItem(Module.SETTINGS, "/admin/settings", "Settings", "⚙️"),
)

MEMBER_MENU: tuple[MenuItem, ...] = (
    MenuItem(Module.PORTAL_DASHBOARD, "/member-portal/dashboard", "Dashboard", "🏠"),
    MenuItem(Module.PORTAL_DONATE, "/member-portal/donate", "Donate", "💝"),
    MenuItem(Module.PORTAL_DONATION_HISTORY, "/member-portal/donation-history", "Donation History", "🧾"),
    MenuItem(Module.PORTAL_EVENTS, "/member-portal/events", "Events", "📅"),
)

MENUS = {"admin": ADMIN_MENU, "member": MEMBER_MENU}
