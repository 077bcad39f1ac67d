from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    mongodb_uri: str = "mongodb://localhost:27017"
    mongodb_db: str = "orphanagecare"
    host: str = "0.0.0.0"
    port: int = 5001
    cors_origin: str = "https://orphanage-frontened1.onrender.com"
    log_level: str = "INFO"
    log_file: str | None = None
    log_format: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    log_datefmt: str = "%Y-%m-%d %H:%M:%S"
    driver_log_level: str = "WARNING"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

settings = Settings()
