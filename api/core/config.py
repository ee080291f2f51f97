import os

from dotenv import load_dotenv

# Load .env
load_dotenv()

BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

# ---- SCRIPTURE DATA ----
# Active provider: "osis", "book_module" or "api_bible"
SCRIPTURE_PROVIDER = os.getenv("SCRIPTURE_PROVIDER", "osis")
SCRIPTURE_DATA_DIR = os.getenv("SCRIPTURE_DATA_DIR", os.path.join(BASE_DIR, "data"))
SCRIPTURE_TRANSLATIONS_FILE = os.getenv(
    "SCRIPTURE_TRANSLATIONS_FILE",
    os.path.join(BASE_DIR, "config", "translations.yml"),
)
SCRIPTURE_HTTP_TIMEOUT = int(os.getenv("SCRIPTURE_HTTP_TIMEOUT", "30"))

# Per-book provider: translation bundled in {SCRIPTURE_DATA_DIR}/{code lowercased}/
BOOK_MODULE_TRANSLATION = os.getenv("BOOK_MODULE_TRANSLATION", "KJV")

# ---- API.BIBLE ----
API_BIBLE_KEY = os.getenv("API_BIBLE_KEY")
API_BIBLE_BASE_URL = os.getenv("API_BIBLE_BASE_URL", "https://api.scripture.api.bible/v1")
API_BIBLE_ID = os.getenv("API_BIBLE_ID")

# ---- READER DEFAULTS ----
DEFAULT_TRANSLATION = os.getenv("DEFAULT_BIBLE_TRANSLATION", "KJV")

# ---- SERVER ----
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
SECRET_KEY = os.getenv("SECRET_KEY", "change-me")
