# mobile_detect/config.py

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Server
    host: str = "0.0.0.0"
    port: int = 10001
    workers: int = 1
    log_level: str = "info"

    # Detection
    precompile_rules: bool = False  # compile the combined table for every request detector

    # HTTP integration
    device_header: str = "X-Device-Type"
    check_param: str = "r"

    class Config:
        env_file = ".env"
        env_prefix = "MOBILE_DETECT_"


settings = Settings()
