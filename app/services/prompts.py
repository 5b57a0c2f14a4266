FLASHCARD_PROMPT_TEMPLATE = """
You are an AI tutor that generates flashcards from study material.
Take the following content and convert it into flashcards in strict JSON format only.
Your response must be ONLY valid JSON with no additional text, markdown formatting, or code blocks.

Format:
{{
  "flashcards": [
    {{ "question": "Question 1", "answer": "Answer 1" }},
    {{ "question": "Question 2", "answer": "Answer 2" }}
  ]
}}

Input:
{text}
"""


def build_flashcard_prompt(text: str) -> str:
    """Embed the extracted document text, as-is, at the end of the flashcard instructions."""
    return FLASHCARD_PROMPT_TEMPLATE.format(text=text)
