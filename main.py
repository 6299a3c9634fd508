# main.py
import logging

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from config import CORS_ORIGINS, DATABASE_URL, PORT, configure_logging
from database import check_connection, init_db
from errors import AppError
from routers import routers
from utils.messages import get_message

configure_logging()
logger = logging.getLogger("haladesk")

# App instance
app = FastAPI(title="HalaDesk API")

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Error handlers
@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    lang = request.headers.get("Accept-Language")
    content = {"message": get_message(exc.message_key, lang)}
    if exc.errors:
        content["errors"] = exc.errors
    return JSONResponse(status_code=exc.status_code, content=content)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    lang = request.headers.get("Accept-Language")
    errors = [
        {"field": ".".join(str(part) for part in error["loc"] if part != "body"), "message": error["msg"]}
        for error in exc.errors()
    ]
    return JSONResponse(
        status_code=400,
        content={"message": get_message("validation_failed", lang), "errors": errors},
    )


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    lang = request.headers.get("Accept-Language")
    key = {404: "route_not_found", 405: "method_not_allowed"}.get(exc.status_code)
    message = get_message(key, lang) if key else str(exc.detail)
    return JSONResponse(status_code=exc.status_code, content={"message": message}, headers=exc.headers)


for router in routers:
    app.include_router(router)


@app.get("/", tags=["health"])
def root():
    return {"status": "ok", "service": "haladesk"}


@app.get("/health", tags=["health"])
def health():
    database_ok = check_connection()
    return JSONResponse(
        status_code=200 if database_ok else 503,
        content={"status": "ok" if database_ok else "degraded", "database": database_ok},
    )


# 500 Fallback Middleware
@app.middleware("http")
async def internal_error_middleware(request: Request, call_next):
    try:
        return await call_next(request)
    except Exception:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        lang = request.headers.get("Accept-Language")
        return JSONResponse(status_code=500, content={"message": get_message("internal_server_error", lang)})


if __name__ == "__main__":
    if DATABASE_URL.startswith("sqlite"):
        init_db()
    uvicorn.run("main:app", host="0.0.0.0", port=PORT, reload=True)
