from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from articles import router as articles_router
from comments import router as comments_router
from core import config, db, endpoints, errors, logging_config
from topics import router as topics_router
from users import router as users_router


@asynccontextmanager
async def lifespan(_: FastAPI):
    # Initialize the DB pool once per process.
    await db.init_pool()
    try:
        yield
    finally:
        await db.close_pool()


def create_app() -> FastAPI:
    logging_config.configure_logging()

    app = FastAPI(title="nc-news", lifespan=lifespan)

    # Allow local frontend dev server to call this API from the browser.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_allow_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    errors.setup_exception_handlers(app)

    app.include_router(topics_router.router, tags=["topics"])
    app.include_router(articles_router.router, tags=["articles"])
    app.include_router(comments_router.router, tags=["comments"])
    app.include_router(users_router.router, tags=["users"])

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    @app.get("/api")
    @app.get("/api/")
    def api_description() -> dict:
        return endpoints.load_endpoints()

    return app


app = create_app()
