"""Settings read from the environment (and a .env file) once at startup."""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

MEMORY_URI = "memory://"
DEFAULT_PORT = 3001

# Repo root: from src/phonebook/config.py go up to repo root
_REPO_ROOT = Path(__file__).resolve().parent.parent.parent


def load_env_file() -> None:
    """Load .env from repo root or current dir. Existing variables win."""
    for path in (_REPO_ROOT / ".env", Path.cwd() / ".env"):
        if path.exists():
            load_dotenv(path)
            break


@dataclass(frozen=True)
class Settings:
    """NEO4J_URI is the storage connection string; memory:// selects the in-memory store."""

    database_uri: str = "bolt://localhost:7687"
    database_user: str = "neo4j"
    database_password: str = "password"
    port: int = DEFAULT_PORT
    log_level: str = "INFO"

    @property
    def uses_memory_store(self) -> bool:
        return self.database_uri.startswith(MEMORY_URI)

    @classmethod
    def from_env(cls, environ=None) -> "Settings":
        env = os.environ if environ is None else environ
        raw_port = (env.get("PORT") or "").strip() or str(DEFAULT_PORT)
        try:
            port = int(raw_port)
        except ValueError:
            raise ValueError(f"PORT must be an integer, got {raw_port!r}") from None
        if not 0 < port < 65536:
            raise ValueError(f"PORT out of range: {port}")
        return cls(
            database_uri=(env.get("NEO4J_URI") or "bolt://localhost:7687").strip(),
            database_user=(env.get("NEO4J_USER") or "neo4j").strip(),
            database_password=(env.get("NEO4J_PASSWORD") or "password").strip(),
            port=port,
            log_level=(env.get("LOG_LEVEL") or "INFO").strip().upper(),
        )
