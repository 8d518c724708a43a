import logging

from flask import Blueprint, request, jsonify

from models import db
from models.alumni_profile_model import AlumniProfile
from models.user_model import Role, User
from utils.auth import requires
from utils.errors import AuthenticationError, ConflictError
from utils.jwt_utils import create_access_token
from utils.schemas import AccountUpdateIn, LoginIn, RegisterIn, parse

logger = logging.getLogger(__name__)

auth_bp = Blueprint("auth", __name__)


@auth_bp.route("/register", methods=["POST"])
def register():
    data = parse(RegisterIn, request.get_json(silent=True))

    if User.find_by_email(data["email"]):
        raise ConflictError("User with this email already exists")

    user = User.create(data["name"], data["email"], data["password"], data["role"])
    db.session.add(user)
    if user.role_enum is Role.ALUMNI:
        # every alumni starts with an empty profile
        user.profile = AlumniProfile()
    db.session.commit()
    logger.info("Registered %s user %s (%s)", user.role, user.id, user.email)

    message = (
        "Registration successful. Please wait for admin approval."
        if user.role_enum is Role.ALUMNI
        else "Registration successful"
    )
    return jsonify({"message": message, "token": create_access_token(user), "user": user.to_dict()}), 201


@auth_bp.route("/login", methods=["POST"])
def login():
    data = parse(LoginIn, request.get_json(silent=True))
    user = User.find_by_email(data["email"])

    if not user or not user.check_password(data["password"]):
        logger.warning("Failed login for %s", data["email"])
        raise AuthenticationError("Invalid email or password")

    return jsonify({"message": "Login successful", "token": create_access_token(user), "user": user.to_dict()})


@auth_bp.route("/me", methods=["GET"])
@requires()
def get_me(user):
    profile = user.profile.to_dict() if user.role_enum is Role.ALUMNI and user.profile else None
    return jsonify({"user": user.to_dict(), "profile": profile})


@auth_bp.route("/me", methods=["PUT"])
@requires(approved=True)
def update_me(user):
    data = parse(AccountUpdateIn, request.get_json(silent=True))

    if "email" in data and data["email"] != user.email and User.find_by_email(data["email"]):
        raise ConflictError("Email already in use")

    for field in ("name", "email"):
        if data.get(field):
            setattr(user, field, data[field])
    db.session.commit()
    return jsonify({"message": "Profile updated successfully", "user": user.to_dict()})
