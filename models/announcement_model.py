from models import db, utcnow
from models.user_model import Role

AUDIENCES = ("all", "alumni", "students")

# which target_audience values each role may read
VISIBLE_AUDIENCES = {
    Role.ADMIN: AUDIENCES,
    Role.ALUMNI: ("all", "alumni"),
    Role.STUDENT: ("all", "students"),
}


class Announcement(db.Model):
    __tablename__ = "announcements"

    id = db.Column(db.Integer, primary_key=True)
    created_by = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False)
    title = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text, nullable=False)
    target_audience = db.Column(db.String(10), nullable=False, default="all")
    created_at = db.Column(db.DateTime, default=utcnow)
    updated_at = db.Column(db.DateTime, default=utcnow)

    author = db.relationship("User", back_populates="announcements")

    @classmethod
    def visible_to(cls, role):
        return cls.query.filter(cls.target_audience.in_(VISIBLE_AUDIENCES[Role(role)])).order_by(
            cls.created_at.desc(), cls.id.desc()
        )

    def is_visible_to(self, role):
        return self.target_audience in VISIBLE_AUDIENCES[Role(role)]

    def to_dict(self):
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "target_audience": self.target_audience,
            "created_by": self.created_by,
            "author_name": self.author.name if self.author else None,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }
