import logging
from typing import Union

from fastapi import APIRouter, Depends, File, Request, UploadFile
from fastapi.responses import JSONResponse
from starlette.datastructures import UploadFile as StarletteUploadFile

from app.config import Settings
from app.schemas.flashcard import ErrorResponse, FlashcardResponse, ParseErrorResponse
from app.services.flashcard_service import FlashcardParseError, generate_flashcards

logger = logging.getLogger(__name__)

router = APIRouter(tags=["flashcards"])

NO_FILE_ERROR = "No file uploaded."
PROCESSING_ERROR = "Failed to process PDF and generate flashcards."


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


# Flash card generation endpoint

@router.post(
    "/chatbot-file",
    responses={
        200: {"model": FlashcardResponse},
        400: {"model": ErrorResponse},
        500: {"model": Union[ParseErrorResponse, ErrorResponse]},
    },
)
def generate_flash_cards_from_file(
    file: Union[UploadFile, str, None] = File(None),
    settings: Settings = Depends(get_settings),
):
    """
    Generate flashcards from an uploaded PDF as a list of {"question", "answer"} objects.
    """
    # A plain form value under "file" is not an upload
    if not isinstance(file, StarletteUploadFile):
        return JSONResponse(status_code=400, content={"error": NO_FILE_ERROR})

    try:
        data = file.file.read()
        result = generate_flashcards(data, settings)
        # Serialising here keeps encoding failures inside the error handling below
        return JSONResponse(content=result)
    except FlashcardParseError as e:
        return JSONResponse(status_code=500, content={"error": e.message, "raw": e.raw})
    except Exception:
        logger.exception("Flashcard generation failed for %s", file.filename)
        return JSONResponse(status_code=500, content={"error": PROCESSING_ERROR})
