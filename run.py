import argparse
from typing import List, Optional

import uvicorn

from blogapi.core.config import settings


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Serve the blog API")
    parser.add_argument("--host", default="0.0.0.0", help="Bind address (default: 0.0.0.0)")
    parser.add_argument("--port", type=int, default=8000, help="Bind port (default: 8000)")
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Restart on code changes (always on when DEBUG is set)",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=1,
        help="Worker processes; ignored with --reload",
    )
    parser.add_argument(
        "--migrate",
        action="store_true",
        help="Apply Alembic migrations before serving",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    use_reload = args.reload or settings.DEBUG

    if args.migrate:
        from blogapi.db.init_db import init_db
        init_db()

    if settings.DEBUG:
        print(f"{settings.PROJECT_NAME} {settings.VERSION} ({settings.ENVIRONMENT})")
        print(f"Listening on http://{args.host}:{args.port}, docs at /docs")

    uvicorn.run(
        "blogapi.main:app",
        host=args.host,
        port=args.port,
        reload=use_reload,
        workers=None if use_reload else args.workers,
        log_level="debug" if settings.DEBUG else "info",
    )


if __name__ == "__main__":
    main()
