import logging
import os
import time
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from signup_api.config import settings
from signup_api.core.errors import ServiceError
from signup_api.database.gateways import log_auth_events
from signup_api.database.supabase_client import get_auth_supabase
from signup_api.modules.registration import routes as registration_routes
from signup_api.modules.users import routes as users_routes
from signup_api.modules.animation_services import routes as animation_services_routes

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.app_name,
    debug=settings.debug,
    redirect_slashes=False,
)


@app.exception_handler(ServiceError)
async def service_error_handler(request: Request, exc: ServiceError):
    content = {"success": False, "message": exc.message, "stage": exc.stage}
    if exc.code:
        content["code"] = exc.code
    if exc.extra.get("field"):
        content["field"] = exc.extra["field"]
    if exc.detail and not settings.is_production:
        content["error"] = exc.detail
    return JSONResponse(status_code=exc.status_code, content=content)


def internal_error_response(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled exception on %s %s: %s", request.method, request.url.path, exc)
    content = {"success": False, "message": "Internal server error"}
    if not settings.is_production:
        content["error"] = str(exc)
    return JSONResponse(status_code=500, content=content)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    return internal_error_response(request, exc)


class ResponseHeadersMiddleware:
    def __init__(self, app):
        self.app = app

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        async def send_with_headers(message):
            if message["type"] == "http.response.start":
                message.setdefault("headers", [])
                message["headers"].extend([
                    (b"X-Content-Type-Options", b"nosniff"),
                    (b"X-Frame-Options", b"DENY"),
                    # Lets the API be reached through an ngrok tunnel from a browser
                    (b"ngrok-skip-browser-warning", b"true"),
                ])
            await send(message)

        await self.app(scope, receive, send_with_headers)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    started = time.perf_counter()
    try:
        response = await call_next(request)
    except Exception as exc:
        # Answered here, inside CORS, so browsers can read the error body
        response = internal_error_response(request, exc)
    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info(
        "%s %s %s -> %d (%.1fms)",
        request.client.host if request.client else "-",
        request.method,
        request.url.path,
        response.status_code,
        elapsed_ms,
    )
    return response


app.add_middleware(ResponseHeadersMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins_list(),
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization", "ngrok-skip-browser-warning"],
)

# Include module routes
app.include_router(registration_routes.router, prefix=settings.api_prefix)
app.include_router(users_routes.router, prefix=settings.api_prefix)
app.include_router(animation_services_routes.router, prefix=settings.api_prefix)


@app.get(f"{settings.api_prefix}/health")
async def health():
    return {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}


@app.on_event("startup")
async def startup_event():
    logger.info("Application startup (environment=%s)", settings.environment)
    if settings.supabase_configured:
        log_auth_events(get_auth_supabase())
    else:
        logger.warning("SUPABASE_URL / SUPABASE_KEY not set; Supabase calls will fail")


@app.on_event("shutdown")
async def shutdown_event():
    logger.info("Application shutdown")


# Mounted last so API routes take precedence
if settings.static_dir and os.path.isdir(settings.static_dir):
    app.mount("/", StaticFiles(directory=settings.static_dir, html=True), name="static")
