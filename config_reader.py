import os
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

start_path = os.path.dirname(__file__)
dotenv_path = os.path.join(start_path, '.env')


class Settings(BaseSettings):
    # reject asset codes outside [A-Za-z0-9]
    strict_code_charset: bool = True

    log_level: str = "INFO"
    log_file: Optional[str] = None
    log_rotation: str = "1 MB"

    model_config = SettingsConfigDict(
        env_prefix='ASSET_',
        env_file=dotenv_path,
        env_file_encoding='utf-8',
        extra='ignore',
        case_sensitive=False,
    )


config = Settings()
