# apps/backend/main.py

from __future__ import annotations

from pathlib import Path

from dotenv import load_dotenv

# -----------------------------------------------------------------------------
# Load .env (MUST be before reading settings)
# -----------------------------------------------------------------------------
BASE_DIR = Path(__file__).resolve().parent  # .../apps/backend
ENV_PATH = BASE_DIR / ".env"
load_dotenv(ENV_PATH, override=True)

from writewell.application import create_app  # noqa: E402
from writewell.core.config import get_settings  # noqa: E402
from writewell.core.logging_config import setup_logging  # noqa: E402

settings = get_settings()
setup_logging(settings.log_level, structured=settings.log_structured)

# A missing OPENAI_API_KEY raises ConfigurationError here, so the server never starts.
app = create_app(settings)
