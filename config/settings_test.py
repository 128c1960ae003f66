"""
Test settings - always uses SQLite, never touches the collection database or lddb.com.
"""

from config.settings import *  # noqa: F401, F403

# Force a throwaway SQLite database for all tests
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": BASE_DIR / "test_db.sqlite3",  # noqa: F405
    }
}

# Faster password hashing for tests
PASSWORD_HASHERS = [
    "django.contrib.auth.hashers.MD5PasswordHasher",
]

LDDB_BASE_URL = "https://www.lddb.com"
LDDB_REQUEST_TIMEOUT_SECONDS = 5

# Logging: Let pytest capture logs (don't use NullHandler)
# Use --log-cli-level=DEBUG or -o log_cli=true to see logs during tests
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {
            "format": "{levelname} {name}: {message}",
            "style": "{",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "simple",
        },
    },
    "root": {
        "handlers": ["console"],
        "level": "WARNING",
    },
    "loggers": {
        "discs_app": {
            "handlers": ["console"],
            "level": "INFO",
            "propagate": True,
        },
    },
}
