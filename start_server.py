#!/usr/bin/env python3
"""
Startup script for the Task Manager Backend
This script starts the FastAPI server with proper configuration
"""

import logging
import os

import uvicorn
from dotenv import load_dotenv

logger = logging.getLogger("start_server")


def main():
    # Load environment variables
    load_dotenv()
    logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").upper())

    # Server configuration
    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8000"))
    reload = os.getenv("RELOAD", "true").lower() == "true"

    if not os.getenv("SECRET_KEY"):
        logger.warning("SECRET_KEY is not set; register and login will fail")

    logger.info("Starting Task Manager Backend Server on %s:%s (reload=%s)", host, port, reload)

    # Start the server
    uvicorn.run(
        "main:app",
        host=host,
        port=port,
        reload=reload,
        log_level=os.getenv("LOG_LEVEL", "info").lower()
    )


if __name__ == "__main__":
    main()
