"""
Main entry point for the FastAPI application.
Run this file to start the server.

Usage:
    python run_fastapi.py

Or with uvicorn directly:
    uvicorn jai_backend.fastapi_app:create_fastapi_app --factory --host 0.0.0.0 --port 5000 --reload

Generate the Prisma client once before the first run:
    prisma generate && prisma db push
"""

import io
import os
import sys

# Set UTF-8 encoding for stdout/stderr to handle Unicode characters on Windows
if sys.platform == "win32":
    sys.stdout = io.TextIOWrapper(
        sys.stdout.buffer, encoding="utf-8", errors="replace", line_buffering=True
    )
    sys.stderr = io.TextIOWrapper(
        sys.stderr.buffer, encoding="utf-8", errors="replace", line_buffering=True
    )

os.environ["PYTHONIOENCODING"] = "utf-8"

from dotenv import load_dotenv

load_dotenv()

import uvicorn

from jai_backend.config.settings import Config

if __name__ == "__main__":
    print(f"Starting Jai backend ({'debug' if Config.DEBUG else 'production'} mode)...")
    print(f"Server running on http://{Config.HOST}:{Config.PORT}")
    print(f"API docs available at http://{Config.HOST}:{Config.PORT}/docs")

    uvicorn.run(
        "jai_backend.fastapi_app:create_fastapi_app",
        factory=True,
        host=Config.HOST,
        port=Config.PORT,
        reload=Config.DEBUG,
        log_level="info" if Config.DEBUG else "warning",
    )
