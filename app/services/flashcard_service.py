import json
import logging
import math
from typing import Any

from app.config import Settings
from app.services.file_processing import extract_text
from app.services.generation import generate_text
from app.services.prompts import build_flashcard_prompt

logger = logging.getLogger(__name__)

RAW_EXCERPT_LENGTH = 500


class FlashcardParseError(Exception):
    """The model reply could not be turned into a non-empty list of flashcards."""

    def __init__(self, reason: str, raw: str):
        self.message = "Model output was not valid JSON. " + reason
        # Lone surrogates cannot be encoded into the UTF-8 response body
        self.raw = raw[:RAW_EXCERPT_LENGTH].encode("utf-8", "replace").decode("utf-8")
        super().__init__(self.message)


def strip_code_fences(text: str) -> str:
    # Removes markers anywhere in the string, not only at the edges
    return text.replace("```json", "").replace("```", "")


def _reject_constant(name: str):
    raise ValueError(f"Invalid JSON literal: {name}")


def _parse_finite_float(literal: str) -> float:
    value = float(literal)
    if not math.isfinite(value):
        raise ValueError(f"Out of range number: {literal}")
    return value


def _is_truthy(value: Any) -> bool:
    # Empty arrays and objects still count as present values
    if isinstance(value, (list, dict)):
        return True
    return bool(value)


def _is_valid_card(card: Any) -> bool:
    return (
        isinstance(card, dict)
        and _is_truthy(card.get("question"))
        and _is_truthy(card.get("answer"))
    )


def parse_flashcards(raw_text: str) -> dict:
    """
    Clean up and validate a model reply.

    Returns the decoded object with its "flashcards" array reduced to the
    entries that have both a question and an answer. Raises
    FlashcardParseError when the reply is not JSON, has no "flashcards"
    array, or has no usable entries.
    """
    text = strip_code_fences(raw_text).strip()

    try:
        payload = json.loads(
            text, parse_constant=_reject_constant, parse_float=_parse_finite_float
        )
    except (ValueError, RecursionError) as e:
        logger.error("JSON parsing error: %s", e)
        logger.error("Raw text: %s", text)
        raise FlashcardParseError(str(e), text) from e

    cards = payload.get("flashcards") if isinstance(payload, dict) else None
    if not isinstance(cards, list):
        logger.error("Raw text: %s", text)
        raise FlashcardParseError('Response missing required "flashcards" array', text)

    valid_cards = [card for card in cards if _is_valid_card(card)]
    if not valid_cards:
        logger.error("Raw text: %s", text)
        raise FlashcardParseError("No valid flashcards found in response", text)

    if len(valid_cards) < len(cards):
        logger.info("Dropped %d malformed flashcards", len(cards) - len(valid_cards))

    payload["flashcards"] = valid_cards
    return payload


def generate_flashcards(data: bytes, settings: Settings) -> dict:
    text = extract_text(data)
    logger.debug("Extracted text: %s", text)
    prompt = build_flashcard_prompt(text)
    raw_text = generate_text(prompt, settings)
    return parse_flashcards(raw_text)
