#!/usr/bin/env python3
"""
Production startup script
"""
import logging

import uvicorn
from app.main import app

logger = logging.getLogger("app")

if __name__ == "__main__":
    port = app.state.settings.port
    logger.info("Flashcard backend running on http://localhost:%d", port)

    # Run the application
    uvicorn.run(
        app,
        host="0.0.0.0",
        port=port,
        log_level="info",
        access_log=True
    )
