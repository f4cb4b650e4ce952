import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from core import db, settings
from core.logs import configure_logging
from posts import router as posts_router
from users import router as users_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings.load_environment()
    configure_logging(settings.log_level())

    # Created once per process; a missing URL or unreachable DB aborts startup.
    app.state.db = await db.connect(
        settings.database_url(),
        min_size=settings.pool_min_size(),
        max_size=settings.pool_max_size(),
        command_timeout=settings.command_timeout(),
    )
    try:
        yield
    finally:
        await app.state.db.close()
        app.state.db = None


app = FastAPI(lifespan=lifespan)

app.include_router(users_router.router, tags=["users"])
app.include_router(posts_router.router, tags=["posts"])


def run() -> None:
    settings.load_environment()
    configure_logging(settings.log_level())
    logger.info("server_starting host=%s port=%s", settings.HOST, settings.PORT)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
