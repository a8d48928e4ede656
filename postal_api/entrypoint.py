"""CLIエントリーポイント"""
import argparse
import json
import sys
from typing import Optional

from .container import ServiceContainer
from .infrastructure.config.settings import Settings
from .shared.exceptions.errors import InvalidInputError, PostalApiError
from .shared.logging.config import get_logger, setup_logging

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """コマンドライン引数のパーサーを作成"""
    parser = argparse.ArgumentParser(description="郵便番号住所検索ツール")

    parser.add_argument(
        "--env-file",
        type=str,
        default=".env",
        help="環境変数ファイルのパス（デフォルト: .env）",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="ログレベル",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    lookup_parser = subparsers.add_parser("lookup", help="郵便番号から住所を検索")
    lookup_parser.add_argument("postal_code", type=str, help="7桁の郵便番号（例: 1000001）")

    subparsers.add_parser("access-logs", help="郵便番号ごとのリクエスト数を表示")
    subparsers.add_parser("serve", help="HTTPサーバーを起動")

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """
    メインエントリーポイント

    Args:
        argv: コマンドライン引数（Noneの場合はsys.argv）

    Returns:
        int: 終了コード（0: 成功, 1: 失敗, 2: 入力エラー）
    """
    args = build_parser().parse_args(argv)

    try:
        settings = Settings(_env_file=args.env_file)

        if args.log_level:
            settings.log_level = args.log_level

        setup_logging(
            level=settings.log_level,
            enable_cloud_logging=settings.gcp_logging_enabled,
            project_id=settings.gcp_project_id,
        )

        if args.command == "serve":
            import uvicorn

            from .server import create_app

            uvicorn.run(
                create_app(settings),
                host="0.0.0.0",
                port=settings.port,
                log_level=settings.log_level.lower(),
            )
            return 0

        container = ServiceContainer(settings)
        try:
            if args.command == "lookup":
                result = container.lookup_service.lookup(args.postal_code)
                output = result.to_response_dict()
            else:
                summaries = container.log_aggregator.report()
                output = {"access_logs": [s.to_response_dict() for s in summaries]}
        finally:
            container.close()

        print(json.dumps(output, ensure_ascii=False, indent=2))
        return 0

    except KeyboardInterrupt:
        logger.warning("Interrupted by user")
        return 130  # SIGINT
    except InvalidInputError as e:
        logger.error(f"Invalid input: {e}")
        return 2
    except PostalApiError as e:
        logger.error(f"Command failed: {e}")
        return 1
    except Exception as e:
        logger.error(f"Application failed: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
