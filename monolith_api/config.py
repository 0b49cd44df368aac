from __future__ import annotations

from dataclasses import dataclass

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = "Monolith API"

    # Bundled binary lives next to the app (see Dockerfile); otherwise it is looked up on PATH
    use_bundled_monolith: bool = False
    bundled_monolith_path: str = "./monolith"
    monolith_command: str = "monolith"

    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8080


@dataclass(frozen=True)
class MonolithConfig:
    executable: str

    @classmethod
    def from_settings(cls, s: Settings) -> MonolithConfig:
        if s.use_bundled_monolith:
            return cls(executable=s.bundled_monolith_path)
        return cls(executable=s.monolith_command)


settings = Settings()
