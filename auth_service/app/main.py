# app/main.py
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from shared.core.config import settings
from shared.core.database import AuthBase, auth_engine
from shared.core.logging_config import setup_logging
from shared.helpers.exception_handler import setup_exception_handlers
from shared.helpers.json_response_helper import success_response
from shared.wrappers.response_wrapper import JsonResponseMiddleware
from shared.models import users  # noqa: F401  (registers the users table)
from .routers import authrouter, userrouter

setup_logging(settings.LOG_LEVEL)

# Create tables
AuthBase.metadata.create_all(bind=auth_engine)

# This MUST exist for uvicorn
app = FastAPI(title="Pantry Auth Service")

# 1️⃣ CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# 2️⃣ Custom JSON response wrapper middleware
app.add_middleware(JsonResponseMiddleware)

# Register exception handlers
setup_exception_handlers(app)

# Routers
app.include_router(authrouter.router)
app.include_router(userrouter.router)


@app.get("/api/auth/health")
def health():
    return success_response({"status": "healthy"}, "Service is healthy")
