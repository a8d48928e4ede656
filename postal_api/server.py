"""HTTPサーバー（FastAPI）"""
from typing import Any, Optional, Protocol

from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse

from .container import ServiceContainer
from .features.access_logs.services.log_aggregator import LogAggregator
from .features.lookup.services.lookup_service import LookupService
from .infrastructure.config.settings import Settings
from .shared.exceptions.errors import (
    GeocodingError,
    InvalidInputError,
    NotFoundError,
    StoreUnavailableError,
)
from .shared.logging.config import get_logger, setup_logging

SERVICE_NAME = "郵便番号住所検索API"
VERSION = "1.0.0"

logger = get_logger(__name__)


class Container(Protocol):
    """エンドポイントが利用するサービス群"""

    lookup_service: LookupService
    log_aggregator: LogAggregator

    def close(self) -> None: ...


def get_lookup_service(request: Request) -> LookupService:
    """郵便番号検索サービスを取得"""
    return request.app.state.container.lookup_service


def get_log_aggregator(request: Request) -> LogAggregator:
    """アクセスログ集計サービスを取得"""
    return request.app.state.container.log_aggregator


def create_app(settings: Settings, container: Optional[Container] = None) -> FastAPI:
    """
    FastAPIアプリケーションを作成

    Args:
        settings: アプリケーション設定
        container: サービスコンテナ（Noneの場合は起動時に設定から生成）

    Returns:
        FastAPI: アプリケーション
    """
    app = FastAPI(
        title=SERVICE_NAME,
        description="郵便番号から住所と東京駅までの距離を返し、アクセスログを集計するサービス",
        version=VERSION,
    )
    app.state.settings = settings
    app.state.container = container

    @app.on_event("startup")
    def startup_event() -> None:
        """起動時の処理"""
        logger.info("Application starting up")
        logger.info(f"Environment: {settings.environment}")
        logger.info(f"Project: {settings.project_name}")

        if app.state.container is None:
            app.state.container = ServiceContainer(settings)

    @app.on_event("shutdown")
    def shutdown_event() -> None:
        """シャットダウン時の処理"""
        logger.info("Application shutting down")
        if app.state.container is not None:
            app.state.container.close()

    @app.get("/")
    def root() -> dict[str, Any]:
        """ルートエンドポイント"""
        return {
            "service": SERVICE_NAME,
            "version": VERSION,
            "status": "running",
            "environment": settings.environment,
        }

    @app.get("/health")
    def health() -> dict[str, str]:
        """ヘルスチェックエンドポイント"""
        return {"status": "healthy"}

    @app.get("/address")
    def get_address(
        postal_code: str = "",
        lookup_service: LookupService = Depends(get_lookup_service),
    ) -> dict[str, Any]:
        """
        郵便番号に該当する住所を取得

        Args:
            postal_code: 7桁の郵便番号

        Returns:
            dict[str, Any]: {postal_code, hit_count, address, tokyo_sta_distance}
        """
        result = lookup_service.lookup(postal_code)
        return result.to_response_dict()

    @app.get("/address/access_logs")
    def get_access_logs(
        log_aggregator: LogAggregator = Depends(get_log_aggregator),
    ) -> dict[str, Any]:
        """
        郵便番号ごとのリクエスト数を取得

        Returns:
            dict[str, Any]: {access_logs: [{postal_code, request_count}, ...]}
        """
        summaries = log_aggregator.report()
        return {"access_logs": [summary.to_response_dict() for summary in summaries]}

    @app.exception_handler(InvalidInputError)
    async def invalid_input_handler(request: Request, exc: InvalidInputError) -> JSONResponse:
        logger.info(f"Rejected request: {exc}")
        return JSONResponse(
            status_code=400,
            content={"message": "Invalid postal code format. Must be 7 digits."},
        )

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
        logger.info(f"Not found: {exc}")
        return JSONResponse(
            status_code=404,
            content={"message": "No location found for the given postal code"},
        )

    @app.exception_handler(GeocodingError)
    async def geocoding_error_handler(request: Request, exc: GeocodingError) -> JSONResponse:
        logger.error(f"External API error: {exc}")
        return JSONResponse(
            status_code=500,
            content={"message": "Failed to fetch data from external API"},
        )

    @app.exception_handler(StoreUnavailableError)
    async def store_error_handler(request: Request, exc: StoreUnavailableError) -> JSONResponse:
        logger.error(f"Access log query error: {exc}")
        return JSONResponse(
            status_code=500,
            content={"message": "Failed to query access logs"},
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """グローバル例外ハンドラー"""
        logger.error(f"Unhandled exception: {exc}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"message": "Internal server error"},
        )

    return app


# 設定を読み込み
settings = Settings()

# ロギングを設定
setup_logging(
    level=settings.log_level,
    enable_cloud_logging=settings.gcp_logging_enabled,
    project_id=settings.gcp_project_id,
)

app = create_app(settings)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        app,
        host="0.0.0.0",
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
