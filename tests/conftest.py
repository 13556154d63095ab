"""
Pytest fixtures for AI Sense Check tests.

External collaborators (Gemini, Sheets webhook, ipapi.co) are always mocked.
"""

from __future__ import annotations

from unittest.mock import AsyncMock, patch

import pytest

from app.models.quiz import Difficulty, Question, QuestionOption
from app.models.signals import Signal

DOMAIN_NAMES = [
    "Email & meetings",
    "Productivity",
    "Collaboration",
    "Learning",
    "Customer interaction",
    "Decision support",
    "Company workflows",
    "Future of work",
]


def make_question(question_id: int, domain: str = "Productivity", difficulty: Difficulty = Difficulty.EASY) -> Question:
    return Question(
        id=question_id,
        domain=domain,
        difficulty=difficulty,
        scenario=f"Scenario {question_id}: your team pilots an AI assistant that drafts weekly status reports.",
        options=[
            QuestionOption(id="a", text="I would check every figure first.", signals=[Signal.TRUST]),
            QuestionOption(
                id="b",
                text="I would ask whether people will really use it.",
                signals=[Signal.ADOPTION, Signal.HUMAN_BEHAVIOR],
            ),
            QuestionOption(id="c", text="I would measure the hours it saves.", signals=[Signal.EFFICIENCY]),
            QuestionOption(id="d", text="I would map how it changes the workflow.", signals=[Signal.SYSTEMS_THINKING]),
        ],
    )


@pytest.fixture
def sample_questions() -> list[Question]:
    return [make_question(i + 1, name) for i, name in enumerate(DOMAIN_NAMES)]


@pytest.fixture(autouse=True)
def clear_sessions():
    from app.services.session_store import session_store

    session_store.clear()
    yield
    session_store.clear()


@pytest.fixture
def mock_generate_all(sample_questions):
    """Replace the LLM fan-out with a fixed set of eight questions."""
    from app.services.question_generator import question_generator

    with patch.object(question_generator, "generate_all", AsyncMock(return_value=sample_questions)) as mocked:
        yield mocked


@pytest.fixture
def mock_persist():
    from app.services.sheets import sheets_client

    with patch.object(sheets_client, "persist", AsyncMock(return_value=True)) as mocked:
        yield mocked


@pytest.fixture
def client():
    """FastAPI TestClient."""
    from fastapi.testclient import TestClient

    from app.core.app import app

    return TestClient(app)
