"""Application configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings


class RedisConfig(BaseSettings):
    """Redis report store configuration."""

    model_config = {"env_prefix": "PROFITSHARE_REDIS_"}

    host: str = "localhost"
    port: int = 6379
    db: int = 0


class S3Config(BaseSettings):
    """S3 report store configuration."""

    model_config = {"env_prefix": "PROFITSHARE_S3_"}

    bucket: str = "profitshare-reports"
    region: str = "us-east-1"
    endpoint_url: str | None = None  # LocalStack override


class AppSettings(BaseSettings):
    """Root application settings aggregating all sub-configs."""

    model_config = {"env_prefix": "PROFITSHARE_"}

    environment: Literal["dev", "uat", "prod"] = "dev"
    log_level: str = "INFO"
    storage_backend: Literal["memory", "redis", "s3"] = "memory"
    report_key_prefix: str = "report:"

    redis: RedisConfig = RedisConfig()
    s3: S3Config = S3Config()
