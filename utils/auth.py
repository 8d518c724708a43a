# utils/auth.py
import functools
from dataclasses import dataclass

from flask import request

from models import db
from models.user_model import Role, User
from utils.errors import (
    ApprovalRequiredError,
    AuthenticationError,
    AuthorizationError,
    InvalidTokenError,
)
from utils.jwt_utils import verify_access_token

ALL_ROLES = frozenset(Role)


@dataclass(frozen=True)
class Access:
    """Gates a route requires: allowed roles, and whether alumni must be approved."""

    roles: frozenset = ALL_ROLES
    approved: bool = False


def authenticate(auth_header):
    if not auth_header or not auth_header.startswith("Bearer "):
        raise AuthenticationError()

    payload = verify_access_token(auth_header.split(" ", 1)[1].strip())
    user_id = payload.get("id")
    user = db.session.get(User, user_id) if isinstance(user_id, int) else None
    if user is None:
        raise InvalidTokenError("Invalid token. User not found.")
    return user


def authorize(user, access):
    if user.role_enum not in access.roles:
        allowed = ", ".join(r.value for r in Role if r in access.roles)
        raise AuthorizationError(f"Access denied. Required role(s): {allowed}")

    if access.approved and user.role_enum is Role.ALUMNI and not user.is_approved:
        raise ApprovalRequiredError()


def requires(*roles, approved=False):
    """
    Route decorator. Resolves the caller from the bearer token, checks role then
    approval, and passes the User to the view as its first argument.
    """
    access = Access(roles=frozenset(Role(r) for r in roles) or ALL_ROLES, approved=approved)

    def decorator(view):
        @functools.wraps(view)
        def wrapper(*args, **kwargs):
            user = authenticate(request.headers.get("Authorization"))
            authorize(user, access)
            return view(user, *args, **kwargs)

        return wrapper

    return decorator
