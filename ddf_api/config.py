# ddf_api/config.py
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from dotenv import load_dotenv

load_dotenv()

DEFAULT_FIXTURE = Path(__file__).resolve().parent.parent / "data" / "mock_listings.json"


def _origins(raw: str) -> List[str]:
    return [o.strip() for o in raw.split(",") if o.strip()] or ["*"]


@dataclass(frozen=True)
class Settings:
    fixture_path: Path = DEFAULT_FIXTURE
    mode: str = "mock"          # "live" once a real DDF feed is wired in
    simulated_latency_ms: int = 0
    cors_origins: List[str] = field(default_factory=lambda: ["*"])
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 3001

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            fixture_path=Path(os.getenv("LISTINGS_FIXTURE", str(DEFAULT_FIXTURE))),
            mode=os.getenv("API_MODE", "mock"),
            simulated_latency_ms=int(os.getenv("SIMULATED_LATENCY_MS", "0") or 0),
            cors_origins=_origins(os.getenv("CORS_ORIGINS", "*")),
            log_level=os.getenv("API_LOG_LEVEL", "INFO").upper(),
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "3001") or 3001),
        )
