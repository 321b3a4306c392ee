"""
Test Interview Actions Module

This module tests interview creation and the interview queries against an
in-memory Firestore.

Dependencies:
- pytest: For testing framework
- app.services.interview_actions: The module being tested
"""

import pytest
from app.schemas.auth.user_auth_schemas import User
from app.test.fakes import FakeCollection
from app.schemas.interview import InterviewCreate
from app.services.interview_actions import (
    create_interview,
    get_interview_by_id,
    get_latest_interviews,
    get_interviews_by_user_id
)

def seed_interview(db, doc_id, user_id, created_at, finalized=True, **fields):
    db.seed("interviews", doc_id, {
        "role": "Backend Engineer",
        "type": "Technical",
        "level": "Mid",
        "techstack": ["python"],
        "questions": ["What is a race condition?"],
        "userId": user_id,
        "finalized": finalized,
        "createdAt": created_at,
        **fields
    })

class TestCreateInterview:
    """Test create_interview envelopes and writes."""

    @pytest.mark.asyncio
    async def test_unauthenticated_user_is_rejected(self, fake_db):
        """Test that creation without a user is refused without writing."""
        result = await create_interview(fake_db, None, InterviewCreate(role="Backend Engineer"))

        assert result.model_dump(exclude_none=True) == {"success": False, "error": "User not authenticated"}
        assert fake_db.writes == []

    @pytest.mark.asyncio
    async def test_user_without_id_is_rejected(self, fake_db):
        """Test that a user without an id is treated as signed out."""
        result = await create_interview(fake_db, User(id=""), InterviewCreate(role="Backend Engineer"))

        assert result.success is False
        assert result.error == "User not authenticated"
        assert fake_db.writes == []

    @pytest.mark.asyncio
    async def test_creates_document_owned_by_user(self, fake_db):
        """Test that only supplied fields are stored, with owner and timestamp."""
        data = InterviewCreate(role="Frontend Engineer", techstack=["react", "typescript"], finalized=True)

        result = await create_interview(fake_db, User(id="user-1"), data)

        assert result.success is True
        stored = fake_db.documents["interviews"][result.id]
        assert stored["role"] == "Frontend Engineer"
        assert stored["techstack"] == ["react", "typescript"]
        assert stored["userId"] == "user-1"
        assert stored["createdAt"].endswith("Z")
        assert "level" not in stored

    @pytest.mark.asyncio
    async def test_store_failure_becomes_envelope(self, fake_db, monkeypatch):
        """Test that a store error is returned as a failure envelope."""
        async def failing_add(self, data):
            raise RuntimeError("deadline exceeded")

        monkeypatch.setattr(FakeCollection, "add", failing_add)

        result = await create_interview(fake_db, User(id="user-1"), InterviewCreate())

        assert result.model_dump(exclude_none=True) == {"success": False, "error": "deadline exceeded"}

    @pytest.mark.asyncio
    async def test_null_fields_are_not_stored(self, fake_db):
        """Test that explicit nulls are dropped and the interview still reads back."""
        data = InterviewCreate.model_validate({"role": "SRE", "techstack": None, "finalized": None})

        result = await create_interview(fake_db, User(id="user-1"), data)

        stored = fake_db.documents["interviews"][result.id]
        assert "techstack" not in stored
        assert "finalized" not in stored
        interviews = await get_interviews_by_user_id(fake_db, "user-1")
        assert [(interview.role, interview.techstack, interview.finalized) for interview in interviews] == [("SRE", [], False)]

    @pytest.mark.asyncio
    async def test_resolves_user_from_coroutine_function(self, fake_db):
        """Test that a deferred user lookup is awaited before writing."""
        async def resolve_user():
            return User(id="user-7")

        result = await create_interview(fake_db, resolve_user, InterviewCreate(role="SRE"))

        assert result.success is True
        assert fake_db.documents["interviews"][result.id]["userId"] == "user-7"

    @pytest.mark.asyncio
    async def test_user_lookup_failure_becomes_envelope(self, fake_db):
        """Test that an error while resolving the user is returned as a failure envelope."""
        async def resolve_user():
            raise RuntimeError("users lookup failed")

        result = await create_interview(fake_db, resolve_user, InterviewCreate(role="SRE"))

        assert result.model_dump(exclude_none=True) == {"success": False, "error": "users lookup failed"}
        assert fake_db.writes == []

class TestInterviewQueries:
    """Test the read-only interview queries."""

    @pytest.mark.asyncio
    async def test_get_interview_by_id(self, fake_db):
        """Test lookup by id, including a missing id."""
        seed_interview(fake_db, "iv-1", "user-1", "2025-01-01T10:00:00.000Z", coverImage="/covers/amazon.png")

        interview = await get_interview_by_id(fake_db, "iv-1")

        assert interview.id == "iv-1"
        assert interview.coverImage == "/covers/amazon.png"
        assert await get_interview_by_id(fake_db, "missing") is None

    @pytest.mark.asyncio
    async def test_stored_nulls_read_as_defaults(self, fake_db):
        """Test that documents holding null fields still load."""
        seed_interview(fake_db, "iv-1", "user-1", "2025-01-01T10:00:00.000Z", techstack=None, questions=None, role=None, finalized=None)

        interview = await get_interview_by_id(fake_db, "iv-1")

        assert interview.techstack == []
        assert interview.questions == []
        assert interview.role == ""
        assert interview.finalized is False

    @pytest.mark.asyncio
    async def test_latest_excludes_own_and_unfinalized(self, fake_db):
        """Test that latest interviews skip the caller's own and drafts."""
        seed_interview(fake_db, "own", "user-1", "2025-01-05T10:00:00.000Z")
        seed_interview(fake_db, "draft", "user-2", "2025-01-04T10:00:00.000Z", finalized=False)
        seed_interview(fake_db, "older", "user-2", "2025-01-02T10:00:00.000Z")
        seed_interview(fake_db, "newer", "user-3", "2025-01-03T10:00:00.000Z")

        interviews = await get_latest_interviews(fake_db, "user-1")

        assert [interview.id for interview in interviews] == ["newer", "older"]
        assert all(interview.userId != "user-1" for interview in interviews)
        assert all(interview.finalized is True for interview in interviews)

    @pytest.mark.asyncio
    async def test_latest_respects_limit(self, fake_db):
        """Test that latest interviews are capped at the limit."""
        for day in range(1, 6):
            seed_interview(fake_db, f"iv-{day}", "user-2", f"2025-01-0{day}T10:00:00.000Z")

        interviews = await get_latest_interviews(fake_db, "user-1", limit=2)

        assert [interview.id for interview in interviews] == ["iv-5", "iv-4"]

    @pytest.mark.asyncio
    async def test_interviews_by_user_newest_first(self, fake_db):
        """Test that a user's interviews are returned newest first."""
        seed_interview(fake_db, "a", "user-1", "2025-01-01T10:00:00.000Z", finalized=False)
        seed_interview(fake_db, "b", "user-1", "2025-01-03T10:00:00.000Z")
        seed_interview(fake_db, "c", "user-2", "2025-01-02T10:00:00.000Z")

        interviews = await get_interviews_by_user_id(fake_db, "user-1")

        assert [interview.id for interview in interviews] == ["b", "a"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("user_id", ["", None])
    async def test_interviews_by_missing_user_skips_store(self, fake_db, user_id):
        """Test that a missing user id returns nothing without querying."""
        seed_interview(fake_db, "a", "user-1", "2025-01-01T10:00:00.000Z")

        assert await get_interviews_by_user_id(fake_db, user_id) == []
        assert fake_db.queries == []
