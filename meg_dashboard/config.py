# meg_dashboard/config.py
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv
from sqlalchemy.engine import URL

# Credenciais ficam no ambiente (ou .env), nunca no HTML
load_dotenv()


@dataclass(frozen=True)
class Settings:
    pghost: str = "localhost"
    pgport: int = 5432
    pgdatabase: Optional[str] = None
    pguser: str = "postgres"
    pgpassword: Optional[str] = None
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"
    log_file: Optional[str] = None
    url_override: Optional[str] = None

    @classmethod
    def from_env(cls) -> "Settings":
        """Lê PGHOST/PGPORT/PGDATABASE/PGUSER/PGPASSWORD, PORT e afins."""
        return cls(
            pghost=os.getenv("PGHOST", "localhost"),
            pgport=int(os.getenv("PGPORT", "5432")),
            pgdatabase=os.getenv("PGDATABASE") or None,
            pguser=os.getenv("PGUSER", "postgres"),
            pgpassword=os.getenv("PGPASSWORD") or None,
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "3000")),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            log_file=os.getenv("LOG_FILE") or None,
            url_override=os.getenv("DATABASE_URL") or None,
        )

    @property
    def database_url(self) -> str | URL:
        if self.url_override:
            return self.url_override
        # como no libpq: sem PGDATABASE, o banco tem o nome do usuário
        return URL.create(
            "postgresql+psycopg",
            username=self.pguser,
            password=self.pgpassword,
            host=self.pghost,
            port=self.pgport,
            database=self.pgdatabase or self.pguser,
        )
