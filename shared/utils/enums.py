from enum import Enum


class UserRole(str, Enum):
    USER = "user"
    ADMIN = "admin"


class UserStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"


class Right(str, Enum):
    GET_OWN_ITEMS = "get_own_items"
    MANAGE_OWN_ITEMS = "manage_own_items"
    GET_USERS = "get_users"
    MANAGE_USERS = "manage_users"


ROLE_RIGHTS = {
    UserRole.USER: {Right.GET_OWN_ITEMS, Right.MANAGE_OWN_ITEMS},
    UserRole.ADMIN: {
        Right.GET_USERS,
        Right.MANAGE_USERS,
        Right.GET_OWN_ITEMS,
        Right.MANAGE_OWN_ITEMS,
    },
}
