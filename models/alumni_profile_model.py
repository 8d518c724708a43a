from models import db, utcnow

PROFILE_FIELDS = (
    "batch", "phone", "company", "designation", "location", "skills", "linkedin", "bio", "is_mentor",
)


class AlumniProfile(db.Model):
    __tablename__ = "alumni_profiles"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), unique=True, nullable=False)
    batch = db.Column(db.String(20))
    phone = db.Column(db.String(30))
    company = db.Column(db.String(255))
    designation = db.Column(db.String(255))
    location = db.Column(db.String(255))
    skills = db.Column(db.Text)
    linkedin = db.Column(db.String(500))
    bio = db.Column(db.Text)
    is_mentor = db.Column(db.Boolean, nullable=False, default=False)
    created_at = db.Column(db.DateTime, default=utcnow)
    updated_at = db.Column(db.DateTime, default=utcnow)

    user = db.relationship("User", back_populates="profile")

    def apply(self, changes):
        for field, value in changes.items():
            if field in PROFILE_FIELDS:
                setattr(self, field, value)
        self.updated_at = utcnow()

    def to_dict(self):
        data = {field: getattr(self, field) for field in PROFILE_FIELDS}
        data.update({
            "id": self.id,
            "user_id": self.user_id,
            "name": self.user.name if self.user else None,
            "email": self.user.email if self.user else None,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        })
        return data
