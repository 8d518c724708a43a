import logging

from flask import Blueprint, request, jsonify
from sqlalchemy import func

from models import db
from models.user_model import Role, User
from utils.auth import requires
from utils.errors import ConflictError, NotFoundError, ValidationError
from utils.schemas import AccountUpdateIn, parse

logger = logging.getLogger(__name__)

user_bp = Blueprint("users", __name__)


def _get_user(user_id):
    user = db.session.get(User, user_id)
    if user is None:
        raise NotFoundError("User not found")
    return user


@user_bp.route("/stats")
@requires(Role.ADMIN)
def stats(admin):
    by_role = dict(db.session.query(User.role, func.count(User.id)).group_by(User.role).all())
    pending = User.query.filter_by(role=Role.ALUMNI.value, is_approved=False).count()
    return jsonify({
        "total": sum(by_role.values()),
        "admins": by_role.get(Role.ADMIN.value, 0),
        "alumni": by_role.get(Role.ALUMNI.value, 0),
        "students": by_role.get(Role.STUDENT.value, 0),
        "pending": pending,
    })


@user_bp.route("/pending")
@requires(Role.ADMIN)
def pending_approvals(admin):
    users = (
        User.query.filter_by(role=Role.ALUMNI.value, is_approved=False)
        .order_by(User.created_at.asc(), User.id.asc())
        .all()
    )
    return jsonify([u.to_dict() for u in users])


@user_bp.route("")
@requires(Role.ADMIN)
def list_users(admin):
    query = User.query
    role = request.args.get("role")
    if role:
        query = query.filter_by(role=role)
    users = query.order_by(User.created_at.desc(), User.id.desc()).all()
    return jsonify([u.to_dict() for u in users])


@user_bp.route("/<int:user_id>")
@requires(Role.ADMIN)
def get_user(admin, user_id):
    return jsonify(_get_user(user_id).to_dict())


@user_bp.route("/<int:user_id>/approve", methods=["PATCH"])
@requires(Role.ADMIN)
def approve_user(admin, user_id):
    user = _get_user(user_id)
    if user.is_approved:
        raise ValidationError("User is already approved")

    user.is_approved = True
    db.session.commit()
    logger.info("User %s approved by admin %s", user.id, admin.id)
    return jsonify({"message": "User approved successfully", "user": user.to_dict()})


@user_bp.route("/<int:user_id>", methods=["PUT"])
@requires(Role.ADMIN)
def update_user(admin, user_id):
    user = _get_user(user_id)
    data = parse(AccountUpdateIn, request.get_json(silent=True))

    if "email" in data and data["email"] != user.email and User.find_by_email(data["email"]):
        raise ConflictError("Email already in use")

    for field in ("name", "email"):
        if data.get(field):
            setattr(user, field, data[field])
    db.session.commit()
    return jsonify({"message": "User updated successfully", "user": user.to_dict()})


@user_bp.route("/<int:user_id>", methods=["DELETE"])
@requires(Role.ADMIN)
def delete_user(admin, user_id):
    user = _get_user(user_id)
    if user.id == admin.id:
        raise ValidationError("Cannot delete your own account")

    db.session.delete(user)
    db.session.commit()
    logger.info("User %s deleted by admin %s", user_id, admin.id)
    return jsonify({"message": "User deleted successfully"})
