"""Global pytest configuration."""

import os

# Pin settings the tests assert on before any imports, so a local .env cannot change them
os.environ.setdefault("DEFAULT_LANGUAGE", "en")
