import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from user_api.config import Settings, configure_logging
from user_api.routes import users, users_dto
from user_api.services.user_store import StoreVariant, build_user_store

logger = logging.getLogger(__name__)

_ROUTERS = {
    StoreVariant.BASIC: users.router,
    StoreVariant.DTO: users_dto.router,
}


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the API with one user store for the configured variant"""
    settings = settings or Settings.from_env()
    configure_logging(settings.log_level)

    store = build_user_store(settings.user_store_variant)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Starting %s with the '%s' user store", settings.app_name, store.variant.value)
        for r in app.routes:
            methods = getattr(r, "methods", None)
            path = getattr(r, "path", None)
            if path:
                methods_str = ", ".join(sorted(methods)) if methods else "N/A"
                logger.info("%-20s %s", methods_str, path)
        yield

    app = FastAPI(title=settings.app_name, lifespan=lifespan)
    app.state.settings = settings
    app.state.user_store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(_ROUTERS[store.variant], tags=["users"])

    @app.get("/health")
    def health_check():
        """Diagnostic endpoint reporting which store variant is running"""
        return {
            "app_name": settings.app_name,
            "variant": store.variant.value,
            "status": "healthy",
            "user_count": store.count(),
        }

    @app.get("/")
    def root():
        return {"message": f"Welcome to {settings.app_name}"}

    return app


app = create_app()
