# main.py: process entry point
from __future__ import annotations

import uvicorn

from country_info.config import load_settings
from country_info.main import create_app

settings = load_settings()
app = create_app(settings)


if __name__ == "__main__":
    uvicorn.run(app, host=settings.host, port=settings.port)
