import os

# Session cookie
SESSION_COOKIE = "quiz_session"

# Expired-session sweep interval (seconds)
CLEANUP_INTERVAL = int(os.getenv("SESSION_CLEANUP_INTERVAL", "300"))
