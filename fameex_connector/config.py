from pydantic import field_validator
from pydantic_settings import BaseSettings

from fameex_connector.constants import DEFAULT_BASE_URL, REQUEST_TIMEOUT


class FameexSettings(BaseSettings):
    # API host, override for testnet or a proxy
    base_url: str = DEFAULT_BASE_URL

    # Trading credentials (left empty in public-only mode)
    api_key: str = ""
    secret_key: str = ""
    trade_pwd: str = ""

    # Skip storing trading credentials entirely
    public_only: bool = False

    request_timeout: float = REQUEST_TIMEOUT

    @field_validator("base_url")
    @classmethod
    def normalize_base_url(cls, v: str) -> str:
        """Strip trailing slash; paths always start with one"""
        v = v.strip()
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"base_url must be an http(s) URL, got {v!r}")
        return v.rstrip("/")

    class Config:
        env_file = ".env"
        env_prefix = "FAMEEX_"
        case_sensitive = False
        extra = "ignore"
