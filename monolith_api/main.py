from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, Response

from monolith_api.config import MonolithConfig, Settings, settings
from monolith_api.models import ArchiveRequest
from monolith_api.services.archiver import Archiver
from monolith_api.services.arguments import content_type_for

logger = logging.getLogger(__name__)

PROBLEM_CONTENT_TYPE = "application/problem+json"


def problem(detail: str, status_code: int = 500) -> JSONResponse:
    return JSONResponse(
        {
            "title": "An error occurred while processing your request.",
            "status": status_code,
            "detail": detail,
        },
        status_code=status_code,
        media_type=PROBLEM_CONTENT_TYPE,
    )


def create_app(app_settings: Settings | None = None) -> FastAPI:
    app_settings = app_settings or settings
    config = MonolithConfig.from_settings(app_settings)
    logger.debug("Use bundled Monolith: %s (%s)", app_settings.use_bundled_monolith, config.executable)

    app = FastAPI(title=app_settings.app_name)
    app.state.archiver = Archiver(config)

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    @app.post("/archive")
    async def do_archive(body: ArchiveRequest, request: Request):
        logger.info("Archive request received")

        if not body.has_source:
            logger.warning("Invalid request: Neither 'url' nor 'stdinHtml' provided")
            return JSONResponse(
                {"detail": "Either 'url' or 'stdinHtml' must be provided."},
                status_code=400,
            )

        if body.uses_stdin:
            logger.info("Processing HTML from stdin")
        else:
            logger.info("Processing URL: %s", body.url)

        archiver: Archiver = request.app.state.archiver
        try:
            result = await archiver.archive(body)
        except OSError as exc:
            logger.exception("Could not start monolith (%s)", archiver.config.executable)
            return problem(f"Failed to start monolith: {exc}")
        except ValueError as exc:
            logger.warning("Rejected monolith arguments: %s", exc)
            return problem(f"Failed to start monolith: {exc}")

        if not result.ok:
            logger.error("Monolith failed with error: %s", result.stderr)
            return problem(f"Monolith failed: {result.stderr}")

        logger.debug("Successfully generated output (length: %d characters)", len(result.stdout))
        return Response(content=result.stdout, media_type=content_type_for(body.options))

    return app


app = create_app()
