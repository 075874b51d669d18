from enum import Enum


class Role(Enum):
    USER = "user"
    ORGANIZER = "organizer"
    ADMIN = "admin"


DASHBOARD_PATHS = {
    Role.ADMIN: "/admin/dashboard",
    Role.ORGANIZER: "/organizer/dashboard",
    Role.USER: "/user/dashboard",
}

LOGIN_PATHS = frozenset({"/login", "/admin-login", "/organizer/login"})
