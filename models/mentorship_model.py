import enum

from models import db, utcnow


class RequestStatus(str, enum.Enum):
    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"


class MentorshipRequest(db.Model):
    __tablename__ = "mentorship_requests"
    __table_args__ = (
        db.UniqueConstraint("student_id", "alumni_id", name="uq_mentorship_student_alumni"),
    )

    id = db.Column(db.Integer, primary_key=True)
    student_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False)
    alumni_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False)
    message = db.Column(db.Text)
    status = db.Column(db.String(10), nullable=False, default=RequestStatus.PENDING.value)
    created_at = db.Column(db.DateTime, default=utcnow)
    updated_at = db.Column(db.DateTime, default=utcnow)

    student = db.relationship("User", foreign_keys=[student_id], back_populates="sent_requests")
    alumni = db.relationship("User", foreign_keys=[alumni_id], back_populates="received_requests")

    def to_dict(self):
        return {
            "id": self.id,
            "student_id": self.student_id,
            "alumni_id": self.alumni_id,
            "message": self.message,
            "status": self.status,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }

    def to_student_view(self):
        """What the requesting student sees: the mentor's contact and job."""
        data = self.to_dict()
        profile = self.alumni.profile
        data.update({
            "alumni_name": self.alumni.name,
            "alumni_email": self.alumni.email,
            "company": profile.company if profile else None,
            "designation": profile.designation if profile else None,
        })
        return data

    def to_alumni_view(self):
        data = self.to_dict()
        data.update({
            "student_name": self.student.name,
            "student_email": self.student.email,
        })
        return data
