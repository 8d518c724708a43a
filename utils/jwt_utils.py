# utils/jwt_utils.py
from datetime import datetime, timedelta, timezone

import jwt
from flask import current_app

from utils.errors import InvalidTokenError, TokenExpiredError


def create_access_token(user, ttl_seconds=None):
    """
    Create a signed JWT for a user. Contains:
      - id (int)
      - email (str)
      - role (str)
      - iat, exp
    """
    if ttl_seconds is None:
        ttl_seconds = current_app.config["JWT_EXPIRES_IN"]
    now = datetime.now(timezone.utc)
    payload = {
        "id": int(user.id),
        "email": user.email,
        "role": user.role,
        "iat": int(now.timestamp()),
        "exp": int((now + timedelta(seconds=ttl_seconds)).timestamp()),
    }
    return jwt.encode(payload, current_app.config["JWT_SECRET"], algorithm=current_app.config["JWT_ALGO"])


def verify_access_token(token: str):
    """
    Returns decoded payload if valid, else raises TokenExpiredError / InvalidTokenError.
    """
    try:
        return jwt.decode(
            token, current_app.config["JWT_SECRET"], algorithms=[current_app.config["JWT_ALGO"]]
        )
    except jwt.ExpiredSignatureError:
        raise TokenExpiredError()
    except jwt.InvalidTokenError:
        raise InvalidTokenError()
