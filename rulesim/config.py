"""
Central configuration.

Every tunable value lives here as a typed, documented field.
Any field can be overridden at runtime via an environment variable of the
same name (case-insensitive), e.g.:

    RULES_API_BASE_URL=http://localhost:9000/v1 pytest     # local proxy
    export CREDENTIAL_FILE=./credential.json              # live checks

A `.env` file at the project root is loaded automatically.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,   # RULES_API_BASE_URL == rules_api_base_url
        extra="ignore",         # silently drop unknown env vars
    )

    # ------------------------------------------------------------------ #
    # Firebase Rules API                                                  #
    # ------------------------------------------------------------------ #
    rules_api_base_url: str = Field(
        "https://firebaserules.googleapis.com/v1",
        description="Base URL of the Rules API (projects.test lives under it)",
    )
    rules_file_name: str = Field(
        "firestore.rules", description="File name reported to the API for the rules source"
    )
    database_documents_prefix: str = Field(
        "/databases/(default)/documents/",
        description="Absolute prefix every document path carries on the wire",
    )
    http_timeout_sec: int = Field(
        30, description="Total timeout for a single Rules API round trip (seconds)"
    )

    # ------------------------------------------------------------------ #
    # Service-account authorization                                       #
    # ------------------------------------------------------------------ #
    token_uri: str = Field(
        "https://oauth2.googleapis.com/token",
        description="OAuth2 token endpoint used when the key file omits token_uri",
    )
    credential_file: Optional[str] = Field(
        None, description="Service-account JSON used by the live end-to-end tests"
    )


# Single shared instance, import this everywhere.
settings = Settings()
