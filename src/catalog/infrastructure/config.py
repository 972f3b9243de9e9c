"""Runtime configuration.

Loaded from environment variables and an optional ``.env`` file. Only
the infrastructure layer reads settings; handlers receive their
collaborators already built.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        products_table: Name of the DynamoDB table holding products.
        storage_backend: ``dynamodb`` in the deployed function, ``json``
            for local development against a file under ``data_dir``.
        data_dir: Directory for the JSON-file backend.
        aws_region: Region override for the DynamoDB client.
        dynamodb_endpoint_url: Endpoint override, e.g. DynamoDB Local.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        log_json: Render log lines as JSON (CloudWatch) or for a console.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    products_table: str = "ProductsTable"
    storage_backend: Literal["dynamodb", "json"] = "dynamodb"
    data_dir: Path = Path("data")
    aws_region: Optional[str] = None
    dynamodb_endpoint_url: Optional[str] = None
    log_level: str = "INFO"
    log_json: bool = True


@lru_cache
def get_settings() -> Settings:
    return Settings()
