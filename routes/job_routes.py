import logging

from flask import Blueprint, request, jsonify
from sqlalchemy import func, or_

from models import db
from models.job_model import JobPosting
from models.user_model import Role
from utils.auth import requires
from utils.errors import AuthorizationError, NotFoundError, ValidationError
from utils.schemas import JobIn, JobUpdateIn, parse

logger = logging.getLogger(__name__)

job_bp = Blueprint("jobs", __name__)


def _get_job(job_id):
    job = db.session.get(JobPosting, job_id)
    if job is None:
        raise NotFoundError("Job posting not found")
    return job


def _get_own_job(user, job_id):
    job = _get_job(job_id)
    if job.alumni_id != user.id:
        raise AuthorizationError("Not authorized to update this job")
    return job


def _newest_first(query):
    return query.order_by(JobPosting.created_at.desc(), JobPosting.id.desc())


@job_bp.route("")
@requires()
def list_jobs(user):
    query = JobPosting.query.filter(JobPosting.is_active.is_(True))
    if request.args.get("job_type"):
        query = query.filter(JobPosting.job_type == request.args["job_type"])
    for field in ("company", "location"):
        if request.args.get(field):
            query = query.filter(getattr(JobPosting, field).ilike(f"%{request.args[field]}%"))
    return jsonify([j.to_dict() for j in _newest_first(query).all()])


@job_bp.route("/search")
@requires()
def search_jobs(user):
    q = (request.args.get("q") or "").strip()
    if not q:
        raise ValidationError("Search query is required")

    pattern = f"%{q}%"
    query = JobPosting.query.filter(
        JobPosting.is_active.is_(True),
        or_(
            JobPosting.title.ilike(pattern),
            JobPosting.company.ilike(pattern),
            JobPosting.location.ilike(pattern),
            JobPosting.description.ilike(pattern),
        ),
    )
    return jsonify([j.to_dict() for j in _newest_first(query).all()])


@job_bp.route("/<int:job_id>")
@requires()
def get_job(user, job_id):
    return jsonify(_get_job(job_id).to_dict())


@job_bp.route("/my/jobs")
@requires(Role.ALUMNI)
def my_jobs(user):
    query = JobPosting.query.filter_by(alumni_id=user.id)
    return jsonify([j.to_dict() for j in _newest_first(query).all()])


@job_bp.route("", methods=["POST"])
@requires(Role.ALUMNI, approved=True)
def create_job(user):
    data = parse(JobIn, request.get_json(silent=True))
    job = JobPosting(alumni_id=user.id)
    job.apply(data)
    db.session.add(job)
    db.session.commit()
    logger.info("Job %s posted by alumni %s", job.id, user.id)
    return jsonify({"message": "Job posting created successfully", "job": job.to_dict()}), 201


@job_bp.route("/<int:job_id>", methods=["PUT"])
@requires(Role.ALUMNI, approved=True)
def update_job(user, job_id):
    job = _get_own_job(user, job_id)
    job.apply(parse(JobUpdateIn, request.get_json(silent=True)))
    db.session.commit()
    return jsonify({"message": "Job posting updated successfully", "job": job.to_dict()})


@job_bp.route("/<int:job_id>/toggle", methods=["PATCH"])
@requires(Role.ALUMNI, approved=True)
def toggle_job(user, job_id):
    job = _get_own_job(user, job_id)
    is_active = job.toggle()
    db.session.commit()
    return jsonify({
        "message": f"Job {'activated' if is_active else 'deactivated'} successfully",
        "is_active": is_active,
    })


@job_bp.route("/<int:job_id>", methods=["DELETE"])
@requires(Role.ALUMNI, Role.ADMIN, approved=True)
def delete_job(user, job_id):
    job = _get_job(job_id)
    if job.alumni_id != user.id and user.role_enum is not Role.ADMIN:
        raise AuthorizationError("Not authorized to delete this job")

    db.session.delete(job)
    db.session.commit()
    logger.info("Job %s deleted by user %s", job_id, user.id)
    return jsonify({"message": "Job posting deleted successfully"})


@job_bp.route("/admin/stats")
@requires(Role.ADMIN)
def stats(user):
    counts = dict(
        db.session.query(JobPosting.is_active, func.count(JobPosting.id)).group_by(JobPosting.is_active).all()
    )
    active, inactive = counts.get(True, 0), counts.get(False, 0)
    return jsonify({"total": active + inactive, "active": active, "inactive": inactive})
