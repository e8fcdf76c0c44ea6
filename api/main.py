"""
A FastAPI-based pet battle: upload cats, vote for them, and keep NSFW images out of the rankings.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware


# Import services
from services import (
    ConfigService,
    DatabaseService,
    ImageCodecService,
    ClassificationService,
    UploadPipeline,
    SeedService,
)

# Import route modules
from routes import (
    main_routes,
    system_routes,
    cat_routes,
)

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.FileHandler("api.log"), logging.StreamHandler()],
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifecycle."""
    logger.info("🚀 Starting Pet Battle API")

    database_service = None
    try:
        # Initialize services in dependency order
        config_service = ConfigService()
        config = config_service.load_config()
        logging.getLogger().setLevel(config.app.log_level.upper())

        database_service = DatabaseService(config.database.url, echo=config.database.echo)
        await database_service.init_database(run_migrations=config.database.run_migrations)
        logger.info("💾 Database initialized")

        image_codec_service = ImageCodecService(config.image)
        classification_service = ClassificationService(config.nsfw)

        # UploadPipeline depends on the codec, the classifier and the store
        upload_pipeline = UploadPipeline(
            image_codec_service, classification_service, database_service
        )
        seed_service = SeedService(image_codec_service, database_service, config.seed)

        # Store services in app state for dependency injection
        app.state.config_service = config_service
        app.state.database_service = database_service
        app.state.image_codec_service = image_codec_service
        app.state.classification_service = classification_service
        app.state.upload_pipeline = upload_pipeline
        app.state.seed_service = seed_service

        if config.seed.enabled:
            loaded = await seed_service.load_litter()
            logger.info(f"🐾 Litter check complete: {loaded} cats loaded")
        else:
            logger.info("🐾 Litter loading disabled in configuration")

        logger.info("✅ Pet Battle API startup completed")

        yield

    except Exception as e:
        logger.error(f"❌ Error during startup: {e}")
        raise
    finally:
        logger.info("🔄 Shutting down Pet Battle API")
        if database_service is not None:
            await database_service.close()
        logger.info("👋 Pet Battle API shutdown completed")


app = FastAPI(
    title="Pet Battle API",
    description="Upload cats, vote for them, and keep images that are not safe for work out of the rankings.",
    version="1.0.0",
    lifespan=lifespan,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(main_routes.router, tags=["main"])
app.include_router(system_routes.router, tags=["system"])
app.include_router(cat_routes.router, tags=["cats"])

if __name__ == "__main__":
    import uvicorn

    try:
        uvicorn.run(
            "main:app",
            host="0.0.0.0",
            port=8080,
            reload=True,  # Enable reload for development
            log_level="info",
            access_log=True,
        )
    except KeyboardInterrupt:
        logger.info("🛑 Server interrupted by user")
    except Exception as e:
        logger.error(f"❌ Server error: {e}")
    finally:
        logger.info("👋 Server shutdown complete")
