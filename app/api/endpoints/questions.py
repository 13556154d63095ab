from fastapi import APIRouter, HTTPException
from loguru import logger
from pydantic import BaseModel

from app.core.exceptions import QuestionGenerationError
from app.models.quiz import Difficulty, Question
from app.services.question_generator import question_generator

router = APIRouter(prefix="/api", tags=["questions"])


class GenerateQuestionsRequest(BaseModel):
    difficulty: Difficulty


class GenerateQuestionsResponse(BaseModel):
    questions: list[Question]


@router.post("/generate-questions", response_model=GenerateQuestionsResponse)
async def generate_questions(payload: GenerateQuestionsRequest) -> GenerateQuestionsResponse:
    try:
        questions = await question_generator.generate_all(payload.difficulty)
    except QuestionGenerationError as e:
        logger.error(f"Error generating questions: {e}")
        raise HTTPException(status_code=500, detail="Failed to generate questions")
    except Exception as e:
        logger.exception(f"Unexpected error generating questions: {e}")
        raise HTTPException(status_code=500, detail="Failed to generate questions")
    return GenerateQuestionsResponse(questions=questions)
