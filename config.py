import os

# Base directory
BASE_DIR = os.path.dirname(os.path.abspath(__file__))

# Paths
LOG_FILE = os.getenv("LOG_FILE", os.path.join(BASE_DIR, "quiz.log"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Server
DEFAULT_HOST = os.getenv("HOST", "127.0.0.1")
DEFAULT_PORT = int(os.getenv("PORT", "8000"))

# Question bank
QUESTION_BANK_PATH = os.getenv("QUESTION_BANK_PATH", "")  # JSON file, empty = built-in samples
DEFAULT_TOPIC = os.getenv("DEFAULT_TOPIC", "mathematics")  # fallback for unknown topics

# Sessions
SESSION_TTL = int(os.getenv("SESSION_TTL", "3600"))  # seconds of inactivity
