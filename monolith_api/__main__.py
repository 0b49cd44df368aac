from __future__ import annotations

import argparse
import logging

import uvicorn

from monolith_api.config import settings


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="HTTP wrapper around the monolith web page archiver")
    parser.add_argument("--host", type=str, default=settings.host, help="Host to bind to")
    parser.add_argument("--port", type=int, default=settings.port, help="HTTP port")
    parser.add_argument("--reload", action="store_true", help="Reload on change")
    parser.add_argument("--log-level", type=str, default=settings.log_level, help="Log level")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(
        "monolith_api.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=args.log_level.lower(),
    )


if __name__ == "__main__":
    main()
