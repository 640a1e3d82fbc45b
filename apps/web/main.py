# apps/web/main.py

from __future__ import annotations

from pathlib import Path

from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent  # .../apps/web
load_dotenv(BASE_DIR / ".env", override=True)

from writewell_web.logging_config import setup_logging  # noqa: E402
from writewell_web.application import create_app  # noqa: E402
from writewell_web.config import get_settings  # noqa: E402

settings = get_settings()
setup_logging(settings.log_level, structured=settings.log_structured)

app = create_app(settings)
