"""Settings for the pytest run: fixed secret, in-memory SQLite."""

import os

os.environ.setdefault("SECRET_KEY", "insecure-test-secret-key")
os.environ.setdefault("DEBUG", "False")

from config.settings import *  # noqa: E402,F401,F403

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}
