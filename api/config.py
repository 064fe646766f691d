"""Runtime settings read from the environment (and a local .env, if present)."""

from typing import List, Optional

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # DATABASE_URL wins; otherwise one is assembled from PG* if PGHOST is set.
    database_url: Optional[str] = None
    pghost: Optional[str] = None
    pgport: int = 5432
    pgdatabase: str = "quick_scorecard"
    pguser: str = "postgres"
    pgpassword: str = ""

    # Comma separated, e.g. "http://localhost:5173,https://scores.example.com"
    cors_origins: str = "http://localhost:5173"
    log_level: str = "INFO"
    apply_schema: bool = False

    @field_validator("log_level")
    @classmethod
    def upper_log_level(cls, v: str) -> str:
        return v.strip().upper()

    @model_validator(mode="after")
    def dsn_from_pg_vars(self) -> "Settings":
        if not self.database_url and self.pghost:
            auth = f"{self.pguser}:{self.pgpassword}" if self.pgpassword else self.pguser
            self.database_url = (
                f"postgresql://{auth}@{self.pghost}:{self.pgport}/{self.pgdatabase}"
            )
        return self

    @property
    def cors_origin_list(self) -> List[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]
