from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from core import errors, middleware
from core.config import Settings
from core.db import Database
from ingestion import service as ingestion_service
from records import repository as records_repository
from records import router as records_router


def create_app(settings: Settings | None = None) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app_settings = settings or Settings.from_env()
        db = Database(
            app_settings.database_url,
            min_size=app_settings.db_pool_min_size,
            max_size=app_settings.db_pool_max_size,
        )
        # Everything up to `yield` is startup; any error here aborts the process.
        await db.connect()
        try:
            await records_repository.ensure_schema(db)
            if app_settings.ingest_on_startup:
                await ingestion_service.ingest_today(db, app_settings)
            app.state.settings = app_settings
            app.state.db = db
            yield
        finally:
            await db.close()

    app = FastAPI(title="apod-records", lifespan=lifespan, docs_url=None, redoc_url=None)

    middleware.install_json_middleware(app)
    errors.install_error_handlers(app)

    app.include_router(records_router.router, prefix="/records", tags=["records"])
    # Path used by clients of the first release.
    app.include_router(
        records_router.router,
        prefix="/apoddata",
        tags=["records"],
        include_in_schema=False,
    )

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    return app


app = create_app()


def run() -> None:
    settings = Settings.from_env()
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
