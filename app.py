# app.py
import logging
import traceback

import click
from flask import Flask, jsonify
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

import config
from models import db
from models.user_model import Role, User
from routes.alumni_routes import alumni_bp
from routes.announcement_routes import announcement_bp
from routes.auth_routes import auth_bp
from routes.job_routes import job_bp
from routes.mentorship_routes import mentorship_bp
from routes.user_routes import user_bp
from utils.errors import PortalError

logger = logging.getLogger(__name__)

BLUEPRINTS = (
    (auth_bp, "/api/auth"),
    (user_bp, "/api/users"),
    (alumni_bp, "/api/alumni"),
    (mentorship_bp, "/api/mentorship"),
    (announcement_bp, "/api/announcements"),
    (job_bp, "/api/jobs"),
)


def create_app(overrides=None):
    app = Flask(__name__)
    app.config.update(config.as_flask_config())
    if overrides:
        app.config.update(overrides)

    logging.basicConfig(
        level=app.config["LOG_LEVEL"],
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    CORS(app, resources={r"/api/*": {"origins": app.config["FRONTEND_URL"]}}, supports_credentials=True)

    db.init_app(app)
    # import models so tables are known
    from models import alumni_profile_model, announcement_model, job_model, mentorship_model  # noqa: F401

    with app.app_context():
        db.create_all()

    for blueprint, prefix in BLUEPRINTS:
        app.register_blueprint(blueprint, url_prefix=prefix)

    register_error_handlers(app)
    register_commands(app)

    @app.route("/api/health")
    def health():
        return jsonify({"status": "OK", "message": "Alumni Management System API is running"})

    return app


# -------------------- Errors --------------------
def register_error_handlers(app):
    @app.errorhandler(PortalError)
    def handle_portal_error(err):
        db.session.rollback()
        return jsonify(err.to_dict()), err.status_code

    @app.errorhandler(404)
    def handle_not_found(err):
        return jsonify({"message": "Route not found"}), 404

    @app.errorhandler(HTTPException)
    def handle_http_error(err):
        return jsonify({"message": err.description}), err.code

    @app.errorhandler(Exception)
    def handle_unexpected(err):
        db.session.rollback()
        logger.exception("Unhandled error")
        body = {"message": "Internal server error"}
        if app.config["APP_ENV"] == "development":
            body["stack"] = traceback.format_exc()
        return jsonify(body), 500


# -------------------- CLI --------------------
def register_commands(app):
    @app.cli.command("create-admin")
    @click.option("--name", required=True)
    @click.option("--email", required=True)
    @click.password_option()
    def create_admin(name, email, password):
        """Provision an approved admin account."""
        if User.find_by_email(email.lower()):
            raise click.ClickException(f"{email} is already registered")

        admin = User.create(name, email.lower(), password, Role.ADMIN)
        admin.is_approved = True
        db.session.add(admin)
        db.session.commit()
        click.echo(f"Admin {admin.email} created (id={admin.id})")


# -------------------- Run --------------------
if __name__ == "__main__":
    create_app().run(debug=config.APP_ENV == "development")
