from __future__ import annotations

import codecs

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator
from dotenv import load_dotenv

load_dotenv()

class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="OFFER_",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = Field("WARNING")
    encoding: str = Field("utf-8")

    @field_validator("log_level", mode="after")
    @classmethod
    def _upper_log_level(cls, v: str) -> str:
        return (v or "WARNING").upper()

    @field_validator("encoding", mode="after")
    @classmethod
    def _known_encoding(cls, v: str) -> str:
        v = (v or "utf-8").strip()
        try:
            codecs.lookup(v)
        except LookupError as ex:
            raise ValueError(f"unknown encoding: {v}") from ex
        return v

settings = Settings()
