from __future__ import annotations

import argparse

import uvicorn

from ontology_api.server.settings import get_settings


def parse_args() -> argparse.Namespace:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Run the ontology API server.")
    parser.add_argument("--host", default=settings.host, help=f"Bind address (default: {settings.host})")
    parser.add_argument("--port", type=int, default=settings.port, help=f"Port (default: {settings.port})")
    parser.add_argument("--reload", action="store_true", help="Reload on code changes (development only)")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    settings = get_settings()
    uvicorn.run(
        "ontology_api.server.api:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
