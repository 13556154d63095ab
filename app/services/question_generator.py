import asyncio
import json
import re
from typing import Any

from loguru import logger
from pydantic import BaseModel, ValidationError

from app.core.config import settings
from app.core.constants import OPTION_IDS, OPTIONS_PER_QUESTION
from app.core.exceptions import QuestionGenerationError
from app.models.quiz import Difficulty, Question, QuestionOption
from app.models.signals import Signal
from app.services.gemini import GeminiService, gemini_service

JSON_OBJECT_PATTERN = re.compile(r"\{[\s\S]*\}")
SIGNAL_NAMES = ", ".join(signal.value for signal in Signal)


class QuestionDomain(BaseModel):
    id: int
    name: str
    easy_focus: str
    hard_focus: str

    def focus_for(self, difficulty: Difficulty) -> str:
        return self.easy_focus if difficulty == Difficulty.EASY else self.hard_focus


DOMAINS: list[QuestionDomain] = [
    QuestionDomain(
        id=1,
        name="Email & meetings",
        easy_focus="Summaries, followups, scheduling",
        hard_focus="Decision traceability, interpretation risk",
    ),
    QuestionDomain(
        id=2,
        name="Productivity",
        easy_focus="Reminders, drafting, automation",
        hard_focus="Dependency, cognitive load, behavior shifts",
    ),
    QuestionDomain(
        id=3,
        name="Collaboration",
        easy_focus="Suggested replies, tagging, sharing",
        hard_focus="Ownership, politics, trust in shared outputs",
    ),
    QuestionDomain(
        id=4,
        name="Learning",
        easy_focus="Summaries, search, assistants",
        hard_focus="Expertise erosion, bias, shallow learning",
    ),
    QuestionDomain(
        id=5,
        name="Customer interaction",
        easy_focus="Draft responses, personalization",
        hard_focus="Brand risk, escalation, emotional nuance",
    ),
    QuestionDomain(
        id=6,
        name="Decision support",
        easy_focus="Dashboards, recommendations",
        hard_focus="Metric distortion, over-trust, incentives",
    ),
    QuestionDomain(
        id=7,
        name="Company workflows",
        easy_focus="Approvals, policy checks",
        hard_focus="Power shifts, compliance interpretation",
    ),
    QuestionDomain(
        id=8,
        name="Future of work",
        easy_focus="Role automation ideas",
        hard_focus="Role redesign, leverage, org structure",
    ),
]


class QuestionGenerator:
    """
    Generates one scenario question per workplace domain via the language model.
    """

    def __init__(self, llm: GeminiService | None = None, timeout: float = settings.QUESTION_TIMEOUT_SECONDS):
        self.llm = llm if llm is not None else gemini_service
        self.timeout = timeout

    @staticmethod
    def get_prompt(domain: QuestionDomain, difficulty: Difficulty) -> str:
        return f"""
        Generate a thought-provoking workplace AI scenario for the domain: "{domain.name}".
        Focus: {domain.focus_for(difficulty)}.

        Length rules (strict):
        - scenario: 2 sentences, 30-50 words total. Set context then present a real tension or decision.
        - each option: 15-22 words. A first-person perspective that reveals how someone thinks about AI.
          All 4 options should be roughly the same length.

        Quality rules:
        - Write in second person ("you" / "your team"). The reader is a general employee in a modern workplace.
        - Never assume or name the reader's job title or role.
        - The scenario must feel real and specific: include a concrete tool, metric or workplace situation.
        - The 4 options must represent genuinely different professional mindsets.
        - Each option gets 1-2 signal tags from: {SIGNAL_NAMES}
        - No buzzwords. No jargon.

        Return ONLY valid JSON, no markdown:
        {{
          "scenario": "...",
          "options": [
            {{ "id": "a", "text": "...", "signals": ["Signal1"] }},
            {{ "id": "b", "text": "...", "signals": ["Signal1"] }},
            {{ "id": "c", "text": "...", "signals": ["Signal1"] }},
            {{ "id": "d", "text": "...", "signals": ["Signal1"] }}
          ]
        }}
        """

    @staticmethod
    def _known_signals(raw_signals: Any, domain_name: str) -> list[Signal]:
        signals = []
        for raw in raw_signals or []:
            try:
                signals.append(Signal(raw))
            except ValueError:
                logger.warning(f"Dropping unknown signal '{raw}' from generated option ({domain_name})")
        return signals

    @staticmethod
    def parse_question(content: str, domain: QuestionDomain, difficulty: Difficulty) -> Question:
        """Extract the JSON object from the model reply and validate it into a Question."""
        if not content:
            raise QuestionGenerationError(f"No response for domain: {domain.name}")

        match = JSON_OBJECT_PATTERN.search(content)
        if not match:
            raise QuestionGenerationError(f"Could not parse JSON for domain: {domain.name}")

        try:
            data = json.loads(match.group(0))
        except json.JSONDecodeError as e:
            raise QuestionGenerationError(f"Invalid JSON for domain: {domain.name}: {e}") from e

        raw_options = data.get("options") if isinstance(data, dict) else None
        if not isinstance(raw_options, list) or len(raw_options) != OPTIONS_PER_QUESTION:
            raise QuestionGenerationError(f"Expected {OPTIONS_PER_QUESTION} options for domain: {domain.name}")

        try:
            options = [
                QuestionOption(
                    id=str(option.get("id", "")).strip().lower(),
                    text=option.get("text", ""),
                    signals=QuestionGenerator._known_signals(option.get("signals"), domain.name),
                )
                for option in raw_options
            ]
            question = Question(
                id=domain.id,
                domain=domain.name,
                difficulty=difficulty,
                scenario=str(data.get("scenario") or "").strip(),
                options=options,
            )
        except (AttributeError, ValidationError) as e:
            raise QuestionGenerationError(f"Malformed question for domain: {domain.name}: {e}") from e

        if sorted(o.id for o in question.options) != list(OPTION_IDS):
            raise QuestionGenerationError(f"Option ids must be {', '.join(OPTION_IDS)} for domain: {domain.name}")
        if not question.scenario or not all(o.text.strip() for o in question.options):
            raise QuestionGenerationError(f"Empty scenario or option text for domain: {domain.name}")
        return question

    async def generate(self, domain: QuestionDomain, difficulty: Difficulty) -> Question:
        prompt = self.get_prompt(domain, difficulty)
        try:
            content = await asyncio.wait_for(self.llm.generate_content_async(prompt), timeout=self.timeout)
        except asyncio.TimeoutError as e:
            raise QuestionGenerationError(f"Timed out generating question for domain: {domain.name}") from e
        return self.parse_question(content, domain, difficulty)

    async def generate_all(self, difficulty: Difficulty) -> list[Question]:
        """
        Generate a question for every domain concurrently.

        All-or-nothing: if any domain fails the whole batch fails.
        """
        tasks = [self.generate(domain, difficulty) for domain in DOMAINS]
        questions = await asyncio.gather(*tasks)
        logger.info(f"Generated {len(questions)} {difficulty.value} questions")
        return list(questions)


question_generator = QuestionGenerator()
