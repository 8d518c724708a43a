from flask import Blueprint, request, jsonify

from models.user_model import Role
from services import mentorship_service
from utils.auth import requires
from utils.schemas import MentorshipIn, StatusIn, parse

mentorship_bp = Blueprint("mentorship", __name__)


@mentorship_bp.route("", methods=["POST"])
@requires(Role.STUDENT)
def create_request(user):
    data = parse(MentorshipIn, request.get_json(silent=True))
    mentorship = mentorship_service.create_request(user, data["alumni_id"], data.get("message"))
    return jsonify({
        "message": "Mentorship request sent successfully",
        "requestId": mentorship.id,
        "request": mentorship.to_dict(),
    }), 201


@mentorship_bp.route("/my-requests")
@requires(Role.STUDENT)
def my_requests(user):
    return jsonify([r.to_student_view() for r in mentorship_service.requests_for_student(user)])


@mentorship_bp.route("/received")
@requires(Role.ALUMNI, approved=True)
def received_requests(user):
    return jsonify([r.to_alumni_view() for r in mentorship_service.requests_for_alumni(user)])


@mentorship_bp.route("/<int:request_id>/status", methods=["PATCH"])
@requires(Role.ALUMNI, approved=True)
def update_status(user, request_id):
    data = parse(StatusIn, request.get_json(silent=True))
    mentorship = mentorship_service.transition(user, request_id, data["status"])
    return jsonify({"message": f"Request {mentorship.status} successfully", "request": mentorship.to_dict()})


@mentorship_bp.route("/<int:request_id>", methods=["DELETE"])
@requires(Role.STUDENT, Role.ALUMNI, approved=True)
def delete_request(user, request_id):
    mentorship_service.delete_request(user, request_id)
    return jsonify({"message": "Request deleted successfully"})


@mentorship_bp.route("/stats")
@requires(Role.ADMIN)
def stats(user):
    return jsonify(mentorship_service.stats())
