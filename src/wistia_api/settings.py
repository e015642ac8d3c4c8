import os
from dataclasses import dataclass

DEFAULT_BASE_URL = "https://api.wistia.com/v1"


@dataclass(frozen=True)
class Settings:
    base_url: str
    api_token: str
    request_timeout_s: float = 15.0
    page_size: int = 100

    @staticmethod
    def from_env() -> "Settings":
        return Settings(
            base_url=os.getenv("WISTIA_BASE_URL", DEFAULT_BASE_URL),
            api_token=os.getenv("WISTIA_API_TOKEN", ""),  # empty in unit tests
            request_timeout_s=float(os.getenv("REQUEST_TIMEOUT_S", "15")),
            page_size=int(os.getenv("PAGE_SIZE", "100")),
        )
