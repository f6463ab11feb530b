# app/__main__.py
"""
Start the API on the configured port (PORT, default 3000).

Usage:
    python -m app
"""

import uvicorn

from app.config import get_settings
from app.main import create_app


def main():
    settings = get_settings()
    uvicorn.run(create_app(settings), host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    main()
