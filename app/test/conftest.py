import json
from unittest.mock import AsyncMock, MagicMock

import pytest

from app.core.route_limiters import limiter
from app.schemas.interview import TranscriptEntry
from app.services.feedback_generation import FeedbackGenerationService
from app.test.fakes import FakeFirestore, FakeFirebase, completion

limiter.enabled = False


@pytest.fixture
def assessment_payload():
    return {
        "totalScore": 72,
        "categoryScores": [
            {"name": "Communication Skills", "score": 80, "comment": "Clear and concise."},
            {"name": "Technical Knowledge", "score": 70, "comment": "Solid fundamentals."},
            {"name": "Problem Solving", "score": 65, "comment": "Needed hints on edge cases."},
            {"name": "Cultural Fit", "score": 75, "comment": "Collaborative mindset."},
            {"name": "Confidence and Clarity", "score": 70, "comment": "Hesitant at times."}
        ],
        "strengths": ["Explains trade-offs", "Structured answers"],
        "areasForImprovement": ["Quantify impact"],
        "finalAssessment": "A capable candidate who should practise system design."
    }


@pytest.fixture
def openai_client(assessment_payload):
    client = MagicMock()
    client.chat.completions.create = AsyncMock(return_value=completion(json.dumps(assessment_payload)))
    return client


@pytest.fixture
def generator(openai_client):
    return FeedbackGenerationService(openai_client, model="gemini-2.0-flash-001")


@pytest.fixture
def fake_db():
    return FakeFirestore()


@pytest.fixture
def fake_firebase(fake_db):
    return FakeFirebase(fake_db)


@pytest.fixture
def transcript():
    return [
        TranscriptEntry(role="assistant", content="Tell me about a project you led."),
        TranscriptEntry(role="user", content="I led the migration of our billing service."),
        TranscriptEntry(role="assistant", content="What was the hardest part?"),
        TranscriptEntry(role="user", content="Keeping invoices consistent during cutover.")
    ]
