from functools import lru_cache
import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field


load_dotenv()


class Settings(BaseModel):
    service_name: str = Field(default="ticket-service")
    audit_log_enabled: bool = Field(default=True)


@lru_cache
def get_settings() -> Settings:
    return Settings(
        service_name=os.getenv("SERVICE_NAME", Settings.model_fields["service_name"].default),
        audit_log_enabled=os.getenv("AUDIT_LOG_ENABLED", "1"),
    )
