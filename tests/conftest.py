import os

# Settings are read at import time; give the test run its own values
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("MAX_SEARCH_DAYS", "366")
