from flask import Blueprint, request, jsonify
from sqlalchemy import or_

from models import db
from models.alumni_profile_model import AlumniProfile
from models.user_model import Role, User
from utils.auth import requires
from utils.errors import NotFoundError, ValidationError
from utils.schemas import ProfileIn, parse

alumni_bp = Blueprint("alumni", __name__)


def _approved_profiles():
    return AlumniProfile.query.join(User).filter(User.is_approved.is_(True))


def _contains(column, text):
    return column.ilike(f"%{text}%")


@alumni_bp.route("")
@requires()
def list_alumni(user):
    query = _approved_profiles()
    if request.args.get("batch"):
        query = query.filter(AlumniProfile.batch == request.args["batch"])
    for field in ("company", "location", "skills"):
        if request.args.get(field):
            query = query.filter(_contains(getattr(AlumniProfile, field), request.args[field]))
    if request.args.get("is_mentor") == "true":
        query = query.filter(AlumniProfile.is_mentor.is_(True))

    return jsonify([p.to_dict() for p in query.order_by(User.name).all()])


@alumni_bp.route("/search")
@requires()
def search_alumni(user):
    q = (request.args.get("q") or "").strip()
    if not q:
        raise ValidationError("Search query is required")

    profiles = _approved_profiles().filter(or_(
        _contains(User.name, q),
        _contains(AlumniProfile.company, q),
        _contains(AlumniProfile.designation, q),
        _contains(AlumniProfile.location, q),
        _contains(AlumniProfile.skills, q),
    )).order_by(User.name).all()
    return jsonify([p.to_dict() for p in profiles])


@alumni_bp.route("/mentors")
@requires()
def list_mentors(user):
    mentors = _approved_profiles().filter(AlumniProfile.is_mentor.is_(True)).order_by(User.name).all()
    return jsonify([p.to_dict() for p in mentors])


@alumni_bp.route("/user/<int:user_id>")
@requires()
def get_alumni_by_user(user, user_id):
    profile = AlumniProfile.query.filter_by(user_id=user_id).first()
    if profile is None:
        raise NotFoundError("Alumni profile not found")
    return jsonify(profile.to_dict())


@alumni_bp.route("/profile/me")
@requires(Role.ALUMNI)
def get_my_profile(user):
    return jsonify(user.profile.to_dict() if user.profile else {})


@alumni_bp.route("/profile/me", methods=["PUT"])
@requires(Role.ALUMNI, approved=True)
def update_my_profile(user):
    data = parse(ProfileIn, request.get_json(silent=True))

    if user.profile is None:
        user.profile = AlumniProfile()
    user.profile.apply(data)
    db.session.commit()
    return jsonify({"message": "Profile updated successfully", "profile": user.profile.to_dict()})


@alumni_bp.route("/mentor/toggle", methods=["PATCH"])
@requires(Role.ALUMNI, approved=True)
def toggle_mentor(user):
    profile = user.profile
    if profile is None:
        raise NotFoundError("Profile not found")

    profile.apply({"is_mentor": not profile.is_mentor})
    db.session.commit()
    return jsonify({
        "message": f"Mentorship {'enabled' if profile.is_mentor else 'disabled'} successfully",
        "is_mentor": profile.is_mentor,
    })
