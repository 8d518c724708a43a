from models import db, utcnow

JOB_TYPES = ("full-time", "part-time", "internship", "contract")
JOB_FIELDS = (
    "title", "company", "location", "description", "requirements", "job_type", "application_link",
)


class JobPosting(db.Model):
    __tablename__ = "job_postings"

    id = db.Column(db.Integer, primary_key=True)
    alumni_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False)
    title = db.Column(db.String(255), nullable=False)
    company = db.Column(db.String(255), nullable=False)
    location = db.Column(db.String(255))
    description = db.Column(db.Text)
    requirements = db.Column(db.Text)
    job_type = db.Column(db.String(20), default="full-time")
    application_link = db.Column(db.String(500))
    is_active = db.Column(db.Boolean, nullable=False, default=True)
    created_at = db.Column(db.DateTime, default=utcnow)
    updated_at = db.Column(db.DateTime, default=utcnow)

    alumni = db.relationship("User", back_populates="jobs")

    def apply(self, changes):
        for field, value in changes.items():
            if field in JOB_FIELDS:
                setattr(self, field, value)
        self.updated_at = utcnow()

    def toggle(self):
        self.is_active = not self.is_active
        self.updated_at = utcnow()
        return self.is_active

    def to_dict(self):
        data = {field: getattr(self, field) for field in JOB_FIELDS}
        data.update({
            "id": self.id,
            "alumni_id": self.alumni_id,
            "alumni_name": self.alumni.name if self.alumni else None,
            "is_active": self.is_active,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        })
        return data
