import logging

import openai

from app.config import Settings

logger = logging.getLogger(__name__)


def generate_text(prompt: str, settings: Settings) -> str:
    """
    Send the prompt to the configured chat model and return the reply text.

    A client is built per call so nothing is shared between requests. Errors
    from the OpenAI SDK (missing key, auth, quota, network) are not caught here.
    """
    client = openai.OpenAI(api_key=settings.api_key)
    logger.info("Requesting flashcards from model %s", settings.model)
    response = client.chat.completions.create(
        model=settings.model,
        messages=[{"role": "user", "content": prompt}],
        temperature=0.7,
    )
    return response.choices[0].message.content or ""
