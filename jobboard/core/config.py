"""Application configuration management."""

from typing import Literal

from pydantic import ConfigDict, Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database
    database_url: str

    # Client API key required on sign-up and login
    api_key: str

    # Tokens
    token_secret: str
    token_algorithm: Literal["HS256", "HS384", "HS512"] = "HS256"
    token_expire_minutes: int = Field(default=1440, ge=1, le=43200)

    # Passwords
    password_hash_rounds: int = Field(default=12, ge=4, le=31)

    # Sign-up
    temporary_password_length: int = Field(default=9, ge=6, le=64)
    product_name: str = "BiT Jobs"

    # Mailgun
    mailgun_domain: str = ""
    mailgun_api_key: str = ""
    mailgun_base_url: str = "https://api.mailgun.net/v3"
    mail_sender: str = "BiT Jobs Support <support@bitjobs.example>"

    # Zip code service
    zipcode_api_key: str = ""
    zipcode_base_url: str = "https://www.zipcodeapi.com/rest"

    outbound_timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        description="Upper bound for every call to an external collaborator",
    )

    model_config = ConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


settings = Settings()
