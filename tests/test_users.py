from models import db
from models.alumni_profile_model import AlumniProfile
from models.job_model import JobPosting
from models.mentorship_model import MentorshipRequest


def test_non_admins_are_rejected(client, student):
    response = client.get("/api/users", headers=student["headers"])

    assert response.status_code == 403
    assert response.get_json()["message"] == "Access denied. Required role(s): admin"


def test_list_users_by_role(client, admin, student, make_user):
    alumni = make_user("alumni")

    everyone = client.get("/api/users", headers=admin["headers"]).get_json()
    only_alumni = client.get("/api/users?role=alumni", headers=admin["headers"]).get_json()

    assert {u["id"] for u in everyone} == {admin["id"], student["id"], alumni["id"]}
    assert [u["id"] for u in only_alumni] == [alumni["id"]]
    assert "password" not in everyone[0]


def test_pending_and_approve(client, admin, make_user):
    pending = make_user("alumni")

    assert [u["id"] for u in client.get("/api/users/pending", headers=admin["headers"]).get_json()] == [pending["id"]]

    approved = client.patch(f"/api/users/{pending['id']}/approve", headers=admin["headers"])
    assert approved.status_code == 200
    assert approved.get_json()["user"]["is_approved"] is True

    again = client.patch(f"/api/users/{pending['id']}/approve", headers=admin["headers"])
    assert again.status_code == 400
    assert again.get_json()["message"] == "User is already approved"

    # the same token now passes the approval gate
    response = client.put("/api/alumni/profile/me", json={"company": "Hooli"}, headers=pending["headers"])
    assert response.status_code == 200


def test_get_and_update_user(client, admin, student):
    assert client.get("/api/users/999", headers=admin["headers"]).status_code == 404

    response = client.put(f"/api/users/{student['id']}", json={"name": "Fixed Name"}, headers=admin["headers"])

    assert response.status_code == 200
    assert client.get(f"/api/users/{student['id']}", headers=admin["headers"]).get_json()["name"] == "Fixed Name"


def test_admin_cannot_delete_self(client, admin):
    response = client.delete(f"/api/users/{admin['id']}", headers=admin["headers"])

    assert response.status_code == 400
    assert response.get_json()["message"] == "Cannot delete your own account"


def test_delete_user_removes_owned_rows(app, client, admin, student, mentor):
    client.post("/api/mentorship", json={"alumni_id": mentor["id"]}, headers=student["headers"])
    client.post("/api/jobs", json={"title": "SRE", "company": "Initech"}, headers=mentor["headers"])

    response = client.delete(f"/api/users/{mentor['id']}", headers=admin["headers"])

    assert response.status_code == 200
    with app.app_context():
        assert AlumniProfile.query.filter_by(user_id=mentor["id"]).count() == 0
        assert JobPosting.query.count() == 0
        assert MentorshipRequest.query.count() == 0
        assert db.session.query(MentorshipRequest).filter_by(student_id=student["id"]).first() is None


def test_stats(client, admin, student, make_user):
    make_user("alumni")
    make_user("alumni", approved=True)

    stats = client.get("/api/users/stats", headers=admin["headers"]).get_json()

    assert stats == {"total": 4, "admins": 1, "alumni": 2, "students": 1, "pending": 1}
