"""
Tests for LLM question generation: reply parsing, signal filtering and the
all-or-nothing fan-out.
"""

from __future__ import annotations

import asyncio
import json
from unittest.mock import AsyncMock, MagicMock

import pytest

from app.core.exceptions import QuestionGenerationError
from app.models.quiz import Difficulty
from app.models.signals import Signal
from app.services.question_generator import DOMAINS, QuestionGenerator


def _reply(options=None, scenario="Your team adopts an AI note taker. Half the meeting notes now skip decisions."):
    if options is None:
        options = [
            {"id": "a", "text": "Check the notes", "signals": ["Trust"]},
            {"id": "b", "text": "Ask the team", "signals": ["Adoption", "HumanBehavior"]},
            {"id": "c", "text": "Count saved hours", "signals": ["Efficiency"]},
            {"id": "d", "text": "Redesign the meeting", "signals": ["SystemsThinking"]},
        ]
    return json.dumps({"scenario": scenario, "options": options})


def _generator(*replies):
    llm = MagicMock()
    llm.generate_content_async = AsyncMock(side_effect=list(replies))
    return QuestionGenerator(llm=llm, timeout=5)


def test_parse_question_accepts_markdown_wrapped_json():
    domain = DOMAINS[0]
    content = f"```json\n{_reply()}\n```"
    question = QuestionGenerator.parse_question(content, domain, Difficulty.HARD)
    assert question.id == domain.id
    assert question.domain == "Email & meetings"
    assert question.difficulty == Difficulty.HARD
    assert [o.id for o in question.options] == ["a", "b", "c", "d"]
    assert question.options[1].signals == [Signal.ADOPTION, Signal.HUMAN_BEHAVIOR]


def test_parse_question_drops_unknown_signals():
    options = [
        {"id": "A", "text": "one", "signals": ["Trust", "Curiosity"]},
        {"id": "b", "text": "two", "signals": []},
        {"id": "c", "text": "three", "signals": ["Efficiency"]},
        {"id": "d", "text": "four", "signals": ["Vibes"]},
    ]
    question = QuestionGenerator.parse_question(_reply(options), DOMAINS[1], Difficulty.EASY)
    assert question.options[0].id == "a"
    assert question.options[0].signals == [Signal.TRUST]
    assert question.options[3].signals == []


@pytest.mark.parametrize(
    "content",
    [
        "",
        "Sorry, I cannot help with that.",
        "{not json}",
        json.dumps({"scenario": "x", "options": [{"id": "a", "text": "t", "signals": []}]}),
        json.dumps({"scenario": "x", "options": ["a", "b", "c", "d"]}),
        _reply(
            [
                {"id": "a", "text": "one", "signals": []},
                {"id": "a", "text": "two", "signals": []},
                {"id": "", "text": "three", "signals": []},
                {"id": "zz", "text": "four", "signals": []},
            ]
        ),
        _reply(
            [
                {"id": "a", "text": "one", "signals": []},
                {"id": "b", "text": "two", "signals": []},
                {"id": "c", "text": "three", "signals": []},
                {"id": "e", "text": "four", "signals": []},
            ]
        ),
        _reply(scenario=""),
        _reply(scenario="   "),
        _reply(
            [
                {"id": "a", "text": "one", "signals": []},
                {"id": "b", "text": " ", "signals": []},
                {"id": "c", "text": "three", "signals": []},
                {"id": "d", "text": "four", "signals": []},
            ]
        ),
    ],
)
def test_parse_question_rejects_unusable_replies(content):
    with pytest.raises(QuestionGenerationError):
        QuestionGenerator.parse_question(content, DOMAINS[2], Difficulty.EASY)


def test_prompt_uses_focus_for_difficulty():
    domain = DOMAINS[5]
    assert domain.easy_focus in QuestionGenerator.get_prompt(domain, Difficulty.EASY)
    assert domain.hard_focus in QuestionGenerator.get_prompt(domain, Difficulty.HARD)
    assert "SystemsThinking" in QuestionGenerator.get_prompt(domain, Difficulty.HARD)


def test_generate_all_returns_one_question_per_domain():
    generator = _generator(*[_reply() for _ in DOMAINS])
    questions = asyncio.run(generator.generate_all(Difficulty.EASY))
    assert [q.id for q in questions] == [d.id for d in DOMAINS]
    assert [q.domain for q in questions] == [d.name for d in DOMAINS]
    assert generator.llm.generate_content_async.await_count == len(DOMAINS)


def test_generate_all_fails_when_any_domain_fails():
    replies = [_reply() for _ in DOMAINS]
    replies[3] = "no json here"
    generator = _generator(*replies)
    with pytest.raises(QuestionGenerationError):
        asyncio.run(generator.generate_all(Difficulty.HARD))


def test_generate_all_propagates_llm_errors():
    replies = [_reply() for _ in DOMAINS]
    replies[0] = QuestionGenerationError("Gemini client not initialized")
    generator = _generator(*replies)
    with pytest.raises(QuestionGenerationError):
        asyncio.run(generator.generate_all(Difficulty.EASY))


def test_generate_times_out():
    async def slow(prompt):
        await asyncio.sleep(1)
        return _reply()

    llm = MagicMock()
    llm.generate_content_async = slow
    generator = QuestionGenerator(llm=llm, timeout=0.01)
    with pytest.raises(QuestionGenerationError, match="Timed out"):
        asyncio.run(generator.generate(DOMAINS[0], Difficulty.EASY))
