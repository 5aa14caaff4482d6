import os
from typing import Optional
from dotenv import load_dotenv

# Load environment variables (only in development)
# In containers, environment variables are set directly
if os.getenv("ENVIRONMENT") != "production":
    load_dotenv()


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes")


def _env_int(name: str) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    return int(raw)


# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Adapter configuration
JABDB_ADAPTER = os.getenv("JABDB_ADAPTER", "json")  # Options: 'json', 'memory'

# File adapter configuration
JABDB_SOURCE = os.getenv("JABDB_SOURCE", "jabdb.json")  # Path to the database file
JABDB_REQUIRE_JSON_FILE = _env_flag("JABDB_REQUIRE_JSON_FILE", "true")
JABDB_JSON_INDENT = _env_int("JABDB_JSON_INDENT")  # None writes compact JSON
