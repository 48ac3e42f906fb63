import os
from pydantic_settings import BaseSettings


def _parse_cors_origins() -> list[str] | None:
    """Parse CORS_ORIGINS env var as comma-separated string or JSON list."""
    raw = os.environ.get("CORS_ORIGINS")
    if not raw:
        return None
    if raw.startswith("["):
        import json
        return json.loads(raw)
    return [o.strip() for o in raw.split(",") if o.strip()]


class Settings(BaseSettings):
    cors_origins: list[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
    ]
    debug: bool = False
    log_level: str = "INFO"
    rate_limit: str = "60/minute"

    # Resource catalog; empty means the catalog bundled with the package
    catalog_path: str = ""

    # Relevance scoring bonuses
    difficulty_match_bonus: int = 15
    skill_match_bonus: int = 5
    free_beginner_bonus: int = 10

    # Max resources per presentation category
    fundamentals_cap: int = 5
    core_cap: int = 8
    advanced_cap: int = 5
    free_cap: int = 6

    # Classification is flagged when more than this share of a pool is web dev content
    max_web_ratio: float = 0.5

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


_cors_override = _parse_cors_origins()
settings = Settings(**{"cors_origins": _cors_override} if _cors_override else {})
