from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    server_host: str = "0.0.0.0"
    server_port: int = 8080
    log_level: str = "INFO"
    # Table (or Redis hash) holding the user records
    table_name: str = "users"
    # One of: memory, redis, dynamodb
    store_backend: str = "memory"
    # Redis
    redis_url: str = ""
    # DynamoDB; an empty endpoint uses the regional AWS endpoint
    aws_region: str = ""
    dynamodb_endpoint_url: str = ""


# module-level settings instance for convenience across the app
settings = Settings()
