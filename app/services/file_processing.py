import logging

import fitz  # PyMuPDF

logger = logging.getLogger(__name__)


# Extract text from PDF bytes held in memory

def extract_text(data: bytes) -> str:
    try:
        doc = fitz.open(stream=data, filetype="pdf")
    except RuntimeError as e:
        raise ValueError(f"Could not read PDF document: {e}") from e
    text = ""
    with doc:
        for page in doc:
            text += page.get_text()
    logger.info("Extracted %d characters from %d-byte upload", len(text), len(data))
    return text
