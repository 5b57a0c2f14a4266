from pydantic import BaseModel
from typing import List


class Flashcard(BaseModel):
    question: str
    answer: str


class FlashcardResponse(BaseModel):
    flashcards: List[Flashcard]


class ErrorResponse(BaseModel):
    error: str


class ParseErrorResponse(ErrorResponse):
    raw: str
