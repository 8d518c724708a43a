"""
Mentorship request workflow.

A request starts ``pending`` and may move once, to ``accepted`` or
``rejected``, and only by the alumni it was sent to. There is at most one
request per (student, alumni) pair; the unique constraint on the table is
what enforces it, so concurrent duplicates lose at insert time.
"""
import logging

from sqlalchemy import func, or_
from sqlalchemy.exc import IntegrityError

from models import db, utcnow
from models.mentorship_model import MentorshipRequest, RequestStatus
from models.user_model import Role, User
from utils.errors import AuthorizationError, ConflictError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)

DUPLICATE_MESSAGE = "Mentorship request already exists."

TRANSITIONS = {
    RequestStatus.PENDING: {RequestStatus.ACCEPTED, RequestStatus.REJECTED},
    RequestStatus.ACCEPTED: set(),
    RequestStatus.REJECTED: set(),
}


def create_request(student, alumni_id, message=None):
    alumni = db.session.get(User, alumni_id)
    if alumni is None or alumni.role_enum is not Role.ALUMNI:
        raise NotFoundError("Alumni not found")

    if alumni.profile is None or not alumni.profile.is_mentor:
        raise ValidationError("This alumni is not offering mentorship")

    request = MentorshipRequest(student_id=student.id, alumni_id=alumni.id, message=message)
    db.session.add(request)
    try:
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        raise ConflictError(DUPLICATE_MESSAGE)

    logger.info("Mentorship request %s: student %s -> alumni %s", request.id, student.id, alumni.id)
    return request


def requests_for_student(student):
    return (
        MentorshipRequest.query.filter_by(student_id=student.id)
        .order_by(MentorshipRequest.created_at.desc(), MentorshipRequest.id.desc())
        .all()
    )


def requests_for_alumni(alumni):
    return (
        MentorshipRequest.query.filter_by(alumni_id=alumni.id)
        .order_by(MentorshipRequest.created_at.desc(), MentorshipRequest.id.desc())
        .all()
    )


def transition(alumni, request_id, new_status):
    request = db.session.get(MentorshipRequest, request_id)
    if request is None:
        raise NotFoundError("Request not found")

    if request.alumni_id != alumni.id:
        raise AuthorizationError("Not authorized to update this request")

    current = RequestStatus(request.status)
    target = RequestStatus(new_status)
    if target not in TRANSITIONS[current]:
        raise ConflictError(f"Request is already {current.value}")

    request.status = target.value
    request.updated_at = utcnow()
    db.session.commit()
    logger.info("Mentorship request %s %s by alumni %s", request.id, target.value, alumni.id)
    return request


def delete_request(user, request_id):
    """Either party may delete; anyone else gets the same answer as a missing id."""
    request = MentorshipRequest.query.filter(
        MentorshipRequest.id == request_id,
        or_(MentorshipRequest.student_id == user.id, MentorshipRequest.alumni_id == user.id),
    ).first()
    if request is None:
        raise NotFoundError("Request not found or not authorized")

    db.session.delete(request)
    db.session.commit()
    logger.info("Mentorship request %s deleted by user %s", request_id, user.id)


def stats():
    counts = dict(
        db.session.query(MentorshipRequest.status, func.count(MentorshipRequest.id))
        .group_by(MentorshipRequest.status)
        .all()
    )
    result = {status.value: counts.get(status.value, 0) for status in RequestStatus}
    result["total"] = sum(result.values())
    return result
