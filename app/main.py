from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import Settings, load_settings
from app.logging_config import setup_logging
from app.routers import flashcard


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or load_settings()
    setup_logging(settings.log_level)

    app = FastAPI(
        title="PDF Flashcard Generator",
        description="Turns uploaded PDF study material into question/answer flashcards",
        version="1.0.0"
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(flashcard.router)

    @app.get("/")
    def read_root():
        return {"message": "Welcome to the PDF Flashcard Generator API!"}

    @app.get("/health")
    def health_check():
        return {"status": "healthy", "message": "API is running"}

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=app.state.settings.port)
