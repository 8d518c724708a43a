from tests.conftest import fake


def test_update_own_profile(client, make_user):
    alumni = make_user("alumni", approved=True)
    payload = {
        "batch": "2019",
        "company": "Globex",
        "skills": "python, sql",
        "linkedin": "https://www.linkedin.com/in/someone",
    }

    response = client.put("/api/alumni/profile/me", json=payload, headers=alumni["headers"])

    assert response.status_code == 200
    profile = response.get_json()["profile"]
    assert profile["company"] == "Globex"
    assert profile["linkedin"].startswith("https://www.linkedin.com/in/someone")
    assert profile["updated_at"]

    mine = client.get("/api/alumni/profile/me", headers=alumni["headers"]).get_json()
    assert mine["batch"] == "2019"


def test_update_profile_rejects_bad_linkedin(client, make_user):
    alumni = make_user("alumni", approved=True)

    response = client.put("/api/alumni/profile/me", json={"linkedin": "not a url"}, headers=alumni["headers"])

    assert response.status_code == 400
    assert response.get_json()["errors"][0]["field"] == "linkedin"


def test_unapproved_alumni_cannot_update_profile(client, make_user):
    pending = make_user("alumni", approved=False)

    response = client.put("/api/alumni/profile/me", json={"company": "Hooli"}, headers=pending["headers"])

    assert response.status_code == 403
    assert client.get("/api/alumni/profile/me", headers=pending["headers"]).status_code == 200


def test_profile_routes_are_alumni_only(client, student):
    assert client.get("/api/alumni/profile/me", headers=student["headers"]).status_code == 403


def test_toggle_mentor(client, make_user):
    alumni = make_user("alumni", approved=True)

    first = client.patch("/api/alumni/mentor/toggle", headers=alumni["headers"]).get_json()
    second = client.patch("/api/alumni/mentor/toggle", headers=alumni["headers"]).get_json()

    assert first["is_mentor"] is True
    assert first["message"] == "Mentorship enabled successfully"
    assert second["is_mentor"] is False


def test_directory_lists_only_approved_alumni(client, student, make_user):
    visible = make_user("alumni", approved=True, company="Initech")
    make_user("alumni", approved=False, company="Initech")

    listing = client.get("/api/alumni", headers=student["headers"]).get_json()

    assert [p["user_id"] for p in listing] == [visible["id"]]
    assert listing[0]["email"] == visible["email"]


def test_directory_filters(client, student, make_user):
    make_user("alumni", approved=True, batch="2018", location="Chennai", skills="Go, Rust")
    mentor = make_user("alumni", approved=True, mentor=True, batch="2020", location="Bengaluru")

    by_batch = client.get("/api/alumni?batch=2018", headers=student["headers"]).get_json()
    assert len(by_batch) == 1 and by_batch[0]["location"] == "Chennai"

    by_skill = client.get("/api/alumni?skills=rust", headers=student["headers"]).get_json()
    assert len(by_skill) == 1

    mentors = client.get("/api/alumni?is_mentor=true", headers=student["headers"]).get_json()
    assert [p["user_id"] for p in mentors] == [mentor["id"]]


def test_mentors_listing(client, student, mentor, make_user):
    make_user("alumni", approved=True, mentor=False)
    make_user("alumni", approved=False, mentor=True)

    mentors = client.get("/api/alumni/mentors", headers=student["headers"]).get_json()

    assert [m["user_id"] for m in mentors] == [mentor["id"]]


def test_search(client, student, make_user):
    make_user("alumni", approved=True, designation="Data Scientist")
    make_user("alumni", approved=True, designation="Product Manager")

    hits = client.get("/api/alumni/search?q=scientist", headers=student["headers"]).get_json()

    assert [h["designation"] for h in hits] == ["Data Scientist"]
    assert client.get("/api/alumni/search?q=", headers=student["headers"]).status_code == 400


def test_profile_by_user_id(client, student, mentor):
    found = client.get(f"/api/alumni/user/{mentor['id']}", headers=student["headers"])
    missing = client.get(f"/api/alumni/user/{student['id']}", headers=student["headers"])

    assert found.status_code == 200
    assert found.get_json()["company"] == "Initech"
    assert missing.status_code == 404


def test_directory_requires_login(client):
    assert client.get(f"/api/alumni?company={fake.company()}").status_code == 401


def test_update_profile_rejects_null_mentor_flag(client, make_user):
    alumni = make_user("alumni", approved=True)

    response = client.put("/api/alumni/profile/me", json={"is_mentor": None}, headers=alumni["headers"])

    assert response.status_code == 400
    assert response.get_json()["message"] == "is_mentor cannot be null"
    assert client.get("/api/alumni/profile/me", headers=alumni["headers"]).get_json()["is_mentor"] is False
