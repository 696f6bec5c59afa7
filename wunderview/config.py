from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    host: str = "127.0.0.1"
    port: int = 9000
    log_level: str = "INFO"
    wunderlist_api_base: str = "https://a.wunderlist.com/api/v1/"
    wunderlist_client_id: str = ""
    wunderlist_access_token: str = ""
    wunderlist_list_id: int | None = None

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
