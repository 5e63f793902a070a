from enum import Enum
from pathlib import Path

from pydantic_settings import BaseSettings

from kitchen.payloads import DEFAULT_USER_ID


ROOT = Path(__file__).resolve().parent.parent


class Env(Enum):
    local = "local"
    dev = "dev"
    prod = "prod"


class Config(BaseSettings):
    env: Env = Env.local
    html_dir: Path = ROOT / "assets" / "html"
    assets_dir: Path = ROOT / "assets"
    site_name: str = "Recipe Hub"
    # Placeholder identity for inventory items added without a user.
    default_user_id: str = DEFAULT_USER_ID
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 3001
