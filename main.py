# -*- coding: utf-8 -*-
"""
FastAPI application for the college event management system.
"""

import logging

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.sessions import SessionMiddleware

import create_first_admin
from college_events import config
from college_events.database import Base, engine, get_db
from college_events.errors import DomainError, StoreError
from college_events.models import admin, event, registration  # noqa: F401 (registers tables)
from college_events.routes import admin_fastapi, events_fastapi, export_fastapi, students_fastapi

logging.basicConfig(
    level=config.LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    filename=config.LOG_FILE,
)

# Create the tables and the first administrator
Base.metadata.create_all(bind=engine)
create_first_admin.create_first_admin()

is_production = config.ENVIRONMENT == "production"

app = FastAPI(
    title="College Event Management API",
    description="Events, student registrations and the admin dashboard",
    version="1.0.0",
    docs_url=None if is_production else "/docs",
    redoc_url=None if is_production else "/redoc",
    openapi_url=None if is_production else "/openapi.json",
)

app.add_middleware(
    SessionMiddleware,
    secret_key=str(config.SECRET_KEY),
    session_cookie=config.SESSION_COOKIE,
    max_age=config.SESSION_MAX_AGE,
    https_only=config.HTTPS_ONLY,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(config.CORS_ORIGINS),
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)


# --- Error responses: {"success": false, "error": "..."} ---

def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "error": message})


@app.exception_handler(DomainError)
async def domain_error_handler(request: Request, exc: DomainError):
    return error_response(exc.status_code, exc.message)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    message = exc.detail
    if exc.status_code == 405:
        message = "Method not allowed"
    return error_response(exc.status_code, message)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    logging.info(f"Rejected request body on {request.url.path}: {exc.errors()}")
    return error_response(400, "Invalid request body")


@app.exception_handler(SQLAlchemyError)
async def store_error_handler(request: Request, exc: SQLAlchemyError):
    logging.error(f"Database error on {request.method} {request.url.path}: {exc}")
    store_error = StoreError()
    return error_response(store_error.status_code, store_error.message)


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    logging.exception(f"Unhandled error on {request.method} {request.url.path}")
    return error_response(500, "Server error occurred")


# Router mounting
app.include_router(events_fastapi.router, prefix="/api/v1/events")
app.include_router(students_fastapi.router, prefix="/api/v1/students")
app.include_router(admin_fastapi.router, prefix="/api/v1/admin")
app.include_router(export_fastapi.router, prefix="/api/v1/export")


@app.get("/health", tags=["Root"])
def health(db: Session = Depends(get_db)):
    db.execute(text("SELECT 1"))
    return {"status": "ok"}


@app.get("/", tags=["Root"])
async def root():
    return {
        "message": "College Event Management System API",
        "documentation": "/docs",
        "endpoints": [
            {"events": "/api/v1/events"},
            {"students": "/api/v1/students"},
            {"admin": "/api/v1/admin/{login,logout,check,stats}"},
            {"export": "/api/v1/export"},
        ],
    }
