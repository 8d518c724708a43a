import enum

from werkzeug.security import generate_password_hash, check_password_hash

from models import db, utcnow


class Role(str, enum.Enum):
    ADMIN = "admin"
    ALUMNI = "alumni"
    STUDENT = "student"


class User(db.Model):
    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False)
    email = db.Column(db.String(255), unique=True, nullable=False)
    password = db.Column(db.String(255), nullable=False)  # hashed
    role = db.Column(db.String(10), nullable=False)
    is_approved = db.Column(db.Boolean, nullable=False, default=False)
    created_at = db.Column(db.DateTime, default=utcnow)

    profile = db.relationship(
        "AlumniProfile", back_populates="user", uselist=False, cascade="all, delete"
    )
    jobs = db.relationship("JobPosting", back_populates="alumni", cascade="all, delete")
    announcements = db.relationship(
        "Announcement", back_populates="author", cascade="all, delete"
    )
    sent_requests = db.relationship(
        "MentorshipRequest",
        foreign_keys="MentorshipRequest.student_id",
        back_populates="student",
        cascade="all, delete",
    )
    received_requests = db.relationship(
        "MentorshipRequest",
        foreign_keys="MentorshipRequest.alumni_id",
        back_populates="alumni",
        cascade="all, delete",
    )

    @classmethod
    def create(cls, name, email, password, role):
        """Students are approved on creation, everybody else waits for an admin."""
        role = Role(role)
        return cls(
            name=name,
            email=email,
            password=generate_password_hash(password),
            role=role.value,
            is_approved=role is Role.STUDENT,
        )

    @classmethod
    def find_by_email(cls, email):
        return cls.query.filter_by(email=email).first()

    def check_password(self, plain_password):
        return check_password_hash(self.password, plain_password)

    @property
    def role_enum(self):
        return Role(self.role)

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "role": self.role,
            "is_approved": self.is_approved,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
