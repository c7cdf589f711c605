# app/main.py

import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.v1.api import api_router
from app.core.config import Settings, get_settings
from app.core.container import build_container
from app.core.logging import configure_logging
from app.db.init_db import init_db, seed_default_categories
from app.services.credential_service import CredentialService
from app.services.mail_service import MailSender

logger = logging.getLogger(__name__)


def create_application(
    settings: Optional[Settings] = None,
    *,
    credentials: Optional[CredentialService] = None,
    mailer: Optional[MailSender] = None,
) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level)
    container = build_container(settings, credentials=credentials, mailer=mailer)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        init_db(container.engine)
        if settings.seed_default_categories:
            with container.session_factory() as db:
                seed_default_categories(db)
        logger.info("%s %s ready", settings.PROJECT_NAME, settings.VERSION)
        yield
        container.engine.dispose()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        lifespan=lifespan,
    )
    app.state.container = container

    # ---------- CORS ----------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.backend_cors_origins,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["Content-Type", "Authorization"],
    )

    # ---------- ROUTERS ----------
    app.include_router(api_router, prefix=settings.api_prefix)

    @app.get("/healthz", tags=["health"])
    def healthz():
        return {"status": "ok"}

    return app


app = create_application()


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=get_settings().port)
