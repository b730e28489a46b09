"""Tests for the teacher view and user profiles."""

from httpx import AsyncClient

from conftest import STUDENT_ID, TEACHER_ID, auth


async def _ask(client: AsyncClient, course_id: int, text: str, solved: bool) -> int:
    response = await client.post(
        "/api/questions",
        json={
            "question_text": text,
            "answer_text": "answer",
            "solved": solved,
            "course_id": course_id,
            "lecture_date": "2024-04-10",
        },
        headers=auth(STUDENT_ID),
    )
    return response.json()["id"]


class TestTeacherAccess:
    """Tests for teacher-only endpoints."""

    async def test_student_forbidden(
        self, api_client: AsyncClient, seeded: dict[str, int]
    ) -> None:
        """Students cannot open the teacher view."""
        response = await api_client.get(
            "/api/teacher/unresolved-questions", headers=auth(STUDENT_ID)
        )

        assert response.status_code == 403

    async def test_anonymous_unauthorized(self, api_client: AsyncClient) -> None:
        """Anonymous callers are rejected."""
        response = await api_client.get("/api/teacher/courses")

        assert response.status_code == 401


class TestTeacherCourses:
    """Tests for claiming courses and triaging questions."""

    async def test_claim_course(
        self, api_client: AsyncClient, seeded: dict[str, int]
    ) -> None:
        """Claiming sets the teacher as owner."""
        response = await api_client.post(
            f"/api/teacher/courses/{seeded['calculus_id']}/claim",
            headers=auth(TEACHER_ID),
        )

        assert response.status_code == 200
        assert response.json()["teacher_id"] == TEACHER_ID

        courses = await api_client.get("/api/teacher/courses", headers=auth(TEACHER_ID))
        assert [c["name"] for c in courses.json()] == ["Calculus I"]

    async def test_claim_unknown_course(
        self, api_client: AsyncClient, seeded: dict[str, int]
    ) -> None:
        """Claiming a missing course is a 404."""
        response = await api_client.post(
            "/api/teacher/courses/9999/claim", headers=auth(TEACHER_ID)
        )

        assert response.status_code == 404

    async def test_unresolved_grouped_by_owned_course(
        self, api_client: AsyncClient, seeded: dict[str, int]
    ) -> None:
        """Only unsolved questions of owned courses should be listed."""
        await api_client.post(
            f"/api/teacher/courses/{seeded['calculus_id']}/claim",
            headers=auth(TEACHER_ID),
        )
        open_id = await _ask(api_client, seeded["calculus_id"], "open", solved=False)
        await _ask(api_client, seeded["calculus_id"], "done", solved=True)
        await _ask(api_client, seeded["physics_id"], "elsewhere", solved=False)

        response = await api_client.get(
            "/api/teacher/unresolved-questions", headers=auth(TEACHER_ID)
        )

        assert response.status_code == 200
        assert response.json() == [
            {
                "course_id": seeded["calculus_id"],
                "course_name": "Calculus I",
                "questions": [{"id": open_id, "question_text": "open", "solved": False}],
            }
        ]


class TestProfile:
    """Tests for /api/users/me."""

    async def test_upsert_creates_student(
        self, api_client: AsyncClient, seeded: dict[str, int]
    ) -> None:
        """A first PUT creates a student profile."""
        response = await api_client.put(
            "/api/users/me",
            json={"faculty_id": seeded["faculty_id"], "display_name": "Hana"},
            headers=auth("new-user"),
        )

        assert response.status_code == 200
        assert response.json()["role"] == "student"

        profile = await api_client.get("/api/users/me", headers=auth("new-user"))
        assert profile.json()["display_name"] == "Hana"

    async def test_upsert_keeps_teacher_role(
        self, api_client: AsyncClient, seeded: dict[str, int]
    ) -> None:
        """Updating a teacher's faculty must not demote them."""
        response = await api_client.put(
            "/api/users/me",
            json={"faculty_id": seeded["faculty_id"]},
            headers=auth(TEACHER_ID),
        )

        assert response.json()["role"] == "teacher"

    async def test_unknown_faculty(
        self, api_client: AsyncClient, seeded: dict[str, int]
    ) -> None:
        """An unknown faculty is a 404."""
        response = await api_client.put(
            "/api/users/me", json={"faculty_id": 999}, headers=auth(STUDENT_ID)
        )

        assert response.status_code == 404

    async def test_unsolved_questions(
        self, api_client: AsyncClient, seeded: dict[str, int]
    ) -> None:
        """The personal page lists only unsolved questions."""
        open_id = await _ask(api_client, seeded["calculus_id"], "open", solved=False)
        await _ask(api_client, seeded["calculus_id"], "done", solved=True)

        response = await api_client.get(
            "/api/users/me/unsolved-questions", headers=auth(STUDENT_ID)
        )

        assert [q["id"] for q in response.json()] == [open_id]
