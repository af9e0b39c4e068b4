from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    # Notion
    notion_api_key: str
    notion_database_id: str | None = None
    notion_api_version: str = "2022-06-28"

    # Outbound HTTP
    http_timeout: float = 30.0

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "info"
