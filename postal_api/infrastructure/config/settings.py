"""アプリケーション設定（Pydantic Settings）"""
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """アプリケーション設定"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Project
    project_name: str = Field(
        default="postal-api",
        description="プロジェクト名",
    )
    environment: str = Field(
        default="development",
        description="環境 (development, staging, production)",
    )

    # GCP / Firestore
    gcp_project_id: str = Field(
        default="postal-api-local",
        description="GCPプロジェクトID",
    )
    firestore_database_id: str = Field(
        default="(default)",
        description="FirestoreデータベースID",
    )
    db_host: Optional[str] = Field(
        default="localhost:8081",
        description="アクセスログ保存先のホスト（例: localhost:8081）。空文字の場合はマネージドのFirestoreに接続",
    )
    access_logs_collection: str = Field(
        default="access_logs",
        description="アクセスログのコレクション名",
    )

    # Geocoding（HeartRails Geo API）
    geocode_api_url: str = Field(
        default="https://geoapi.heartrails.com/api/json",
        description="郵便番号検索APIのURL",
    )
    geocode_timeout: float = Field(
        default=10.0,
        description="郵便番号検索APIのタイムアウト（秒）",
    )
    geocode_user_agent: str = Field(
        default="postal-api/1.0",
        description="郵便番号検索APIへのUser-Agent",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="ログレベル (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    gcp_logging_enabled: bool = Field(
        default=False,
        description="Cloud Loggingを有効にするか",
    )

    # HTTP server
    port: int = Field(
        default=8080,
        description="HTTPサーバーのポート番号",
    )

    @property
    def is_production(self) -> bool:
        """本番環境かどうか"""
        return self.environment.lower() == "production"

    @property
    def is_development(self) -> bool:
        """開発環境かどうか"""
        return self.environment.lower() == "development"
