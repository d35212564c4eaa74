# /tests/test_api.py

"""
HTTP-level tests for the auth gates and the shape of error responses.
Business rules themselves are covered by the service tests.
"""

from datetime import timedelta

import pytest

from lms.core.security import create_access_token


@pytest.fixture
def teacher(make_user):
    return make_user("teacher")


@pytest.fixture
def student(make_user):
    return make_user("student", name="Pat Student")


@pytest.fixture
def course(teacher, make_course):
    return make_course(teacher.id, title="HTTP Basics")


def test_health_check(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["message"] == "LMS API Server"


# --- Auth gate ---

def test_missing_token_is_401(client):
    response = client.get("/api/role/student")
    assert response.status_code == 401
    assert response.json() == {"message": "Access denied. No token provided."}


def test_malformed_header_is_401(client):
    response = client.get("/api/role/student", headers={"Authorization": "Token abc"})
    assert response.status_code == 401
    assert response.json()["message"] == "Invalid token format. Use Bearer TOKEN"


def test_expired_token_is_401(client, student):
    token = create_access_token(student.id, "student", expires_delta=timedelta(minutes=-5))
    response = client.get("/api/role/student", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 401
    assert response.json()["message"] == "Token has expired"


def test_tampered_token_is_401(client, student, auth_headers):
    headers = auth_headers(student.id, "student")
    headers["Authorization"] += "x"
    assert client.get("/api/role/student", headers=headers).status_code == 401


@pytest.mark.parametrize("path, role", [
    ("/api/course/create", "student"),
    ("/api/watch-time/save", "teacher"),
    ("/api/admin/create", "teacher"),
])
def test_wrong_role_is_403_before_the_body_is_read(client, auth_headers, path, role):
    """
    GIVEN a valid token for the wrong role
    WHEN a gated endpoint is called
    THEN it answers 403 and the handler never runs.
    """
    response = client.post(path, json={}, headers=auth_headers("usr_any", role))
    assert response.status_code == 403
    assert response.json()["message"].startswith("Access denied. Only")
    print("\n✅ SUCCESS: test_wrong_role_is_403_before_the_body_is_read passed.")


def test_role_welcome(client, student, auth_headers):
    response = client.get("/api/role/student", headers=auth_headers(student.id, "student"))
    assert response.status_code == 200
    assert response.json()["message"] == "Welcome Student Dashboard"
    assert response.json()["user"]["user_id"] == student.id


# --- Status codes and error bodies ---

def test_duplicate_enroll_is_400(client, student, course, auth_headers):
    headers = auth_headers(student.id, "student")
    first = client.post("/api/course/enroll", json={"courseId": course.id}, headers=headers)
    second = client.post("/api/course/enroll", json={"courseId": course.id}, headers=headers)

    assert first.status_code == 201
    assert second.status_code == 400
    assert second.json() == {"message": "You are already enrolled in this course"}


def test_watch_time_create_then_update(client, student, course, make_lectures, auth_headers):
    lecture = make_lectures(course.id, 1)[0]
    headers = auth_headers(student.id, "student")

    created = client.post("/api/watch-time/save", json={"lectureId": lecture.id, "currentTime": 12}, headers=headers)
    updated = client.post("/api/watch-time/save", json={"lectureId": lecture.id, "currentTime": 30}, headers=headers)
    fetched = client.get(f"/api/watch-time/lecture/{lecture.id}", headers=headers)

    assert created.status_code == 201
    assert updated.status_code == 200
    assert updated.json()["message"] == "Watch time updated successfully"
    assert fetched.json()["currentTime"] == 30


def test_negative_watch_time_is_400(client, student, auth_headers):
    response = client.post(
        "/api/watch-time/save", json={"lectureId": "lec_1", "currentTime": -3},
        headers=auth_headers(student.id, "student"),
    )
    assert response.status_code == 400
    assert response.json()["message"] == "currentTime must be a non-negative number"


def test_certificate_download(client, student, course, make_lectures, watch, auth_headers):
    lectures = make_lectures(course.id, 2)
    headers = auth_headers(student.id, "student")

    watch(student.id, lectures[:1])
    refused = client.get(f"/api/certificate/course/{course.id}", headers=headers)
    assert refused.status_code == 400
    assert refused.json() == {
        "message": "Complete the course to generate certificate",
        "completionPercent": 50,
        "required": 100,
    }

    watch(student.id, lectures[1:])
    response = client.get(f"/api/certificate/course/{course.id}", headers=headers)
    assert response.status_code == 200
    assert response.headers["content-type"] == "application/pdf"
    assert response.headers["content-disposition"] == f'attachment; filename="certificate-{course.id}-{student.id}.pdf"'
    assert response.content.startswith(b"%PDF")


def test_progress_summary_null_average(client, student, course, auth_headers):
    response = client.get(f"/api/progress/summary/{course.id}", headers=auth_headers(student.id, "student"))
    assert response.status_code == 200
    assert response.json()["quizzes"]["averageScore"] is None


def test_admin_self_delete_is_400(client, make_user, auth_headers):
    admin = make_user("admin")
    response = client.delete(f"/api/admin/user/{admin.id}", headers=auth_headers(admin.id, "admin"))
    assert response.status_code == 400
    assert response.json() == {"message": "Cannot delete your own admin account"}


def test_my_submission_absent_is_404_with_body(client, student, auth_headers):
    response = client.get("/api/assignment/asg_any/my-submission", headers=auth_headers(student.id, "student"))
    assert response.status_code == 404
    assert response.json() == {"message": "Submission not found", "submission": None}


def test_malformed_body_is_400_with_message(client, teacher, auth_headers):
    response = client.post(
        "/api/lecture/create", json={"courseId": "c", "title": "t", "videoUrl": "v", "order": "first"},
        headers=auth_headers(teacher.id, "teacher"),
    )
    assert response.status_code == 400
    assert response.json()["message"].startswith("Invalid value for order")


@pytest.mark.parametrize("raw_value", ["NaN", "Infinity"])
def test_non_finite_watch_time_is_400(client, student, course, make_lectures, auth_headers, raw_value):
    lecture = make_lectures(course.id, 1)[0]
    response = client.post(
        "/api/watch-time/save",
        content=f'{{"lectureId": "{lecture.id}", "currentTime": {raw_value}}}',
        headers={**auth_headers(student.id, "student"), "Content-Type": "application/json"},
    )
    assert response.status_code == 400
    assert response.json()["message"] == "currentTime must be a non-negative number"
