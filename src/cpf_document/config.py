from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

# Load .env if present
load_dotenv()


@dataclass(frozen=True)
class Settings:
    hash_namespace: str = os.getenv("CPF_HASH_NAMESPACE", "CPF")
    log_level: str = os.getenv("CPF_LOG_LEVEL", "WARNING").upper()


settings = Settings()
