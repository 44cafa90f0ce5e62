import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


# Embedding model configuration
EMBEDDING_MODEL_NAME = os.getenv("EMBEDDING_MODEL_NAME", "all-MiniLM-L6-v2")
EMBEDDING_DEVICE = os.getenv("EMBEDDING_DEVICE", "auto")  # "auto" | "cpu" | "cuda"
EMBEDDING_BATCH_SIZE = int(os.getenv("EMBEDDING_BATCH_SIZE", "32"))

# Selection configuration
DEFAULT_MAX_SENTENCES = int(os.getenv("DEFAULT_MAX_SENTENCES", "5"))
MIN_SUMMARY_SENTENCES = int(os.getenv("MIN_SUMMARY_SENTENCES", "3"))
SUMMARY_RATIO = float(os.getenv("SUMMARY_RATIO", "0.2"))
SUMMARY_ORDER = os.getenv("SUMMARY_ORDER", "rank")  # "rank" | "document"

# Scoring configuration
LENGTH_SCORE_DIVISOR = float(os.getenv("LENGTH_SCORE_DIVISOR", "20"))
WEIGHT_LEXICAL = float(os.getenv("WEIGHT_LEXICAL", "1.0"))
WEIGHT_FREQUENCY = float(os.getenv("WEIGHT_FREQUENCY", "1.0"))
WEIGHT_SIMILARITY = float(os.getenv("WEIGHT_SIMILARITY", "1.0"))
WEIGHT_POSITION = float(os.getenv("WEIGHT_POSITION", "1.0"))
WEIGHT_LENGTH = float(os.getenv("WEIGHT_LENGTH", "1.0"))
WEIGHT_TOPIC = float(os.getenv("WEIGHT_TOPIC", "0.0"))
WEIGHT_BIOGRAPHICAL = float(os.getenv("WEIGHT_BIOGRAPHICAL", "0.0"))

# Synonym substitution configuration
ENABLE_SYNONYMS = _env_bool("ENABLE_SYNONYMS", "true")
MAX_SYNONYM_LENGTH = int(os.getenv("MAX_SYNONYM_LENGTH", "7"))
MIN_SYNONYM_WORD_LENGTH = int(os.getenv("MIN_SYNONYM_WORD_LENGTH", "4"))
NLTK_AUTO_DOWNLOAD = _env_bool("NLTK_AUTO_DOWNLOAD", "true")

# Service configuration
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FILE = os.getenv("LOG_FILE") or None
METRICS_PORT = int(os.getenv("METRICS_PORT", "0"))
MODEL_LOAD_RETRIES = int(os.getenv("MODEL_LOAD_RETRIES", "1"))
WARM_UP_MODEL = _env_bool("WARM_UP_MODEL", "true")
