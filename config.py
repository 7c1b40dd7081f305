from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    github_api_secret: str
    log_level: str = "INFO"
    github_timeout: Optional[float] = None  # Seconds, githubkit's default when unset.
