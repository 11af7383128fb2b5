# bikelisting/config.py
import os
from dataclasses import dataclass
from typing import Optional
from dotenv import load_dotenv

load_dotenv()


def _optional_int(name: str) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    return int(raw)


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    price_places: int = 2
    json_indent: Optional[int] = None

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            price_places=int(os.getenv("PRICE_DECIMAL_PLACES", "2")),
            json_indent=_optional_int("LISTING_JSON_INDENT"),
        )


settings = Settings.from_env()
