import asyncio
import logging
import sys

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import ValidationError

from app.core.config import Settings
from app.infrastructure.database import MongoDatabase
from app.infrastructure.repositories.order_repository import MongoOrderRepository
from app.infrastructure.repositories.reservation_repository import MongoReservationRepository
from app.interfaces import orders_api
from app.interfaces.IOrderRepository import IOrderRepository
from app.interfaces.IReservationRepository import IReservationRepository

logger = logging.getLogger(__name__)


# ---------------------------------------------------------
# COMPOSITION ROOT
# ---------------------------------------------------------
def create_app(
    order_repo: IOrderRepository,
    reservation_repo: IReservationRepository,
    project_name: str = "Restaurant Orders API",
) -> FastAPI:
    app = FastAPI(title=project_name)

    # Dashboard and voice agent call us from other origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.order_repo = order_repo
    app.state.reservation_repo = reservation_repo

    app.include_router(orders_api.router)

    @app.get("/")
    def health_check():
        return {"status": "active", "system": project_name}

    return app


# ---------------------------------------------------------
# STARTUP
# ---------------------------------------------------------
def load_settings(**overrides) -> Settings:
    try:
        return Settings(**overrides)
    except ValidationError:
        logger.error("❌ MONGO_URI not set in environment variables")
        sys.exit(1)


async def serve(settings: Settings):
    """Connect once, then run uvicorn on the same loop the Mongo client lives on."""
    try:
        # A malformed URI fails in the client constructor, before any network call
        database = MongoDatabase(settings.MONGO_URI)
        await database.connect()
    except Exception as e:
        # No retry: a service without its database is not worth starting
        logger.error(f"❌ MongoDB connection failed: {e}")
        sys.exit(1)

    app = create_app(
        order_repo=MongoOrderRepository(database.orders),
        reservation_repo=MongoReservationRepository(database.reservations),
        project_name=settings.PROJECT_NAME,
    )
    server = uvicorn.Server(uvicorn.Config(app, host=settings.HOST, port=settings.PORT))
    await server.serve()


def main():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    settings = load_settings()
    logging.getLogger().setLevel(settings.LOG_LEVEL)
    logger.info(f"🚀 Starting {settings.PROJECT_NAME} on {settings.HOST}:{settings.PORT}")
    asyncio.run(serve(settings))


if __name__ == "__main__":
    main()
