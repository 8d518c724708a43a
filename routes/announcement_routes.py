import logging

from flask import Blueprint, request, jsonify

from models import db, utcnow
from models.announcement_model import Announcement
from models.user_model import Role
from utils.auth import requires
from utils.errors import NotFoundError
from utils.schemas import AnnouncementIn, parse

logger = logging.getLogger(__name__)

announcement_bp = Blueprint("announcements", __name__)

DEFAULT_RECENT = 5


def _get_announcement(announcement_id):
    announcement = db.session.get(Announcement, announcement_id)
    if announcement is None:
        raise NotFoundError("Announcement not found")
    return announcement


@announcement_bp.route("")
@requires()
def list_announcements(user):
    return jsonify([a.to_dict() for a in Announcement.visible_to(user.role).all()])


@announcement_bp.route("/recent")
@requires()
def recent_announcements(user):
    limit = request.args.get("limit", DEFAULT_RECENT, type=int)
    if limit is None or limit < 1:
        limit = DEFAULT_RECENT
    return jsonify([a.to_dict() for a in Announcement.visible_to(user.role).limit(limit).all()])


@announcement_bp.route("/<int:announcement_id>")
@requires()
def get_announcement(user, announcement_id):
    announcement = _get_announcement(announcement_id)
    if not announcement.is_visible_to(user.role):
        raise NotFoundError("Announcement not found")
    return jsonify(announcement.to_dict())


@announcement_bp.route("", methods=["POST"])
@requires(Role.ADMIN)
def create_announcement(user):
    data = parse(AnnouncementIn, request.get_json(silent=True))
    announcement = Announcement(
        title=data["title"],
        description=data["description"],
        target_audience=data.get("target_audience") or "all",
        created_by=user.id,
    )
    db.session.add(announcement)
    db.session.commit()
    logger.info("Announcement %s created for %s", announcement.id, announcement.target_audience)
    return jsonify({"message": "Announcement created successfully", "announcement": announcement.to_dict()}), 201


@announcement_bp.route("/<int:announcement_id>", methods=["PUT"])
@requires(Role.ADMIN)
def update_announcement(user, announcement_id):
    announcement = _get_announcement(announcement_id)
    data = parse(AnnouncementIn, request.get_json(silent=True))

    announcement.title = data["title"]
    announcement.description = data["description"]
    if data.get("target_audience"):
        announcement.target_audience = data["target_audience"]
    announcement.updated_at = utcnow()
    db.session.commit()
    return jsonify({"message": "Announcement updated successfully", "announcement": announcement.to_dict()})


@announcement_bp.route("/<int:announcement_id>", methods=["DELETE"])
@requires(Role.ADMIN)
def delete_announcement(user, announcement_id):
    announcement = _get_announcement(announcement_id)
    db.session.delete(announcement)
    db.session.commit()
    logger.info("Announcement %s deleted", announcement_id)
    return jsonify({"message": "Announcement deleted successfully"})
