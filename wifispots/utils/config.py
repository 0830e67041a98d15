import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv


def load_env():
    # load .env from the ROOT of the repo
    env_path = Path(__file__).resolve().parents[2] / ".env"
    load_dotenv(env_path)
    return os.getenv


@dataclass(frozen=True)
class Settings:
    database_url: str = "sqlite:///wifispots.db"
    images_dir: str = "images"
    admin_user: str = "admin"
    admin_password: str = "admin"
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        getenv = load_env()
        return cls(
            database_url=getenv("WIFISPOTS_DATABASE_URL", cls.database_url),
            images_dir=getenv("WIFISPOTS_IMAGES_DIR", cls.images_dir),
            admin_user=getenv("WIFISPOTS_ADMIN_USER", cls.admin_user),
            admin_password=getenv("WIFISPOTS_ADMIN_PASSWORD", cls.admin_password),
            log_level=getenv("WIFISPOTS_LOG_LEVEL", cls.log_level).upper(),
        )
