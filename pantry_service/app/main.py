from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from shared.core.config import settings
from shared.core.database import pantry_engine, Base
from shared.core.logging_config import setup_logging
from shared.helpers.exception_handler import setup_exception_handlers
from shared.helpers.json_response_helper import success_response
from shared.wrappers.response_wrapper import JsonResponseMiddleware
from .models import items, stock_updates  # noqa: F401  (registers tables)
from .router import items_router, stock_updates_router, tools_router

setup_logging(settings.LOG_LEVEL)

app = FastAPI(title="Pantry Service API")

# Create all tables
Base.metadata.create_all(bind=pantry_engine)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_middleware(JsonResponseMiddleware)

setup_exception_handlers(app)

app.include_router(items_router.router)
app.include_router(stock_updates_router.router)
app.include_router(tools_router.router)


@app.get("/api/pantry/health")
def health():
    return success_response({"status": "healthy"}, "Service is healthy")
