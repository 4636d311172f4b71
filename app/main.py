import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from app.config import INSECURE_SECRET_KEY, Settings, get_settings
from app.database import Database
from app.middleware.error_handler import setup_exception_handlers
from app.middleware.request_logging import RequestLoggingMiddleware, configure_logging
from app.routes import admin, auth, cart, chatbot, products
from app.seed import seed_products

logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"


def create_app(settings: Settings = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # the store must be ready before the server accepts requests
        database = Database(settings.database_url)
        if settings.auto_create_tables:
            database.create_db_and_tables()
        if settings.seed_sample_data:
            with database.session() as session:
                seed_products(session)
        if settings.is_production and settings.secret_key == INSECURE_SECRET_KEY:
            logger.warning("SECRET_KEY is the built-in development value; set it before deploying")

        app.state.database = database
        logger.info(f"RapidReads API ready ({settings.env})")
        yield
        logger.info("Shutting down RapidReads API")
        database.dispose()

    app = FastAPI(title="RapidReads Bookstore API", version=API_VERSION, lifespan=lifespan)
    app.state.settings = settings

    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    setup_exception_handlers(app, settings)

    app.include_router(auth.router, prefix="/auth", tags=["Authentication"])
    app.include_router(products.router, prefix="/collection/Products", tags=["Products"])
    app.include_router(cart.router, prefix="/cart", tags=["Cart"])
    app.include_router(chatbot.router, prefix="/chatbot", tags=["Chatbot"])
    app.include_router(admin.router, prefix="/admin", tags=["Admin"])

    if os.path.isdir(settings.images_dir):
        app.mount("/images", StaticFiles(directory=settings.images_dir), name="images")

    @app.get("/")
    def root():
        return {
            "message": "RapidReads API Server",
            "version": API_VERSION,
            "status": "Running",
            "endpoints": {
                "auth": {
                    "register": "POST /auth/register",
                    "login": "POST /auth/login",
                },
                "products": {
                    "all": "GET /collection/Products",
                    "search": "GET /collection/Products/search?q=searchterm",
                    "detail": "GET /collection/Products/{id}",
                },
                "cart": "POST /cart/add",
                "chatbot": "POST /chatbot/respond",
                "admin": "GET /admin/stats",
            },
        }

    return app


app = create_app()


def run():
    import uvicorn

    settings = get_settings()
    uvicorn.run("app.main:app", host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    run()
