from pydantic_settings import BaseSettings


class Config(BaseSettings):
    """Application configuration loaded from environment variables."""

    database_url: str
    host: str
    port: int
    debug: bool
    jwt_secret: str  # Global secret, combined with each user's salt to derive signing keys
    access_token_ttl_minutes: int = 15
    refresh_token_ttl_days: int = 10
    bcrypt_rounds: int = 12  # Work factor for password hashing, lower only in tests
    cors_origins: list[str] = ["*"]

    model_config = {
        "env_file": [".env"],
        "env_prefix": "TASKLIST_",
        "extra": "ignore",
    }
