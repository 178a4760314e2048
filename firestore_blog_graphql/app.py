"""
FastAPI application serving the GraphQL endpoint.
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from strawberry.extensions.tracing import ApolloTracingExtension

from . import init_firestore_odm
from .config import Settings, get_settings
from .documents import DOCUMENT_MODELS
from .firestore_client import FirestoreDB
from .graphql.schema import build_schema, create_graphql_router, validate_schema

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO", debug: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else level.upper(),
        stream=sys.stdout,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        force=True,
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create the application. The Firestore client is opened in the lifespan."""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        configure_logging(settings.log_level, settings.debug)
        logger.info("Connecting to Firestore...")
        db = FirestoreDB.from_settings(settings)
        init_firestore_odm(db, DOCUMENT_MODELS)
        app.state.db = db
        logger.info(f"Server ready on {settings.port}")

        yield

        logger.info("Shutting down...")
        await db.close()

    app = FastAPI(
        title="Firestore Blog GraphQL",
        lifespan=lifespan,
        debug=settings.debug,
    )

    @app.get("/health")
    async def health_check():
        return {"status": "healthy"}

    extensions = [ApolloTracingExtension] if settings.engine_api_key else []
    schema = build_schema(extensions=extensions)

    logger.info("Validating GraphQL schema...")
    validate_schema(schema)

    app.include_router(create_graphql_router(schema, path=settings.graphql_path))
    logger.info(f"GraphQL endpoint mounted at {settings.graphql_path}")
    return app


def main() -> None:
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
