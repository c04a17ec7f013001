# api/main.py
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from core.config import Settings, get_settings
from core.sa.database import Database
from api.routes import people, books

logger = logging.getLogger(__name__)

def create_app(settings: Optional[Settings] = None, database: Optional[Database] = None) -> FastAPI:
    """Build the people/books API.

    The database is opened when the application starts and is closed when it
    stops, on every exit path. Pass ``database`` to serve from an already
    configured instance instead of one built from ``settings``.
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        with (database or Database.from_settings(settings)) as db:
            db.connect()
            db.ensure_schema()
            app.state.database = db
            yield
            logger.info("Shutting down")

    app = FastAPI(title="People & Books API", lifespan=lifespan)
    app.include_router(people.router)
    app.include_router(books.router)
    return app

app = create_app()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "api.main:app",
        host="0.0.0.0",
        port=get_settings().port,
    )
