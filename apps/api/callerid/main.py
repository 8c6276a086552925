import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from callerid.core import GENERIC_ERROR_DETAIL, configure_logging, get_settings, limiter
from callerid.db.session import engine
from callerid.routers import ROUTERS
from callerid.store import StoreError, StoreErrorKind

logger = logging.getLogger(__name__)

_VALUE_ERROR_PREFIX = "Value error, "


@asynccontextmanager
async def lifespan(_app: FastAPI):
    configure_logging()
    yield
    await engine.dispose()


app = FastAPI(
    title="Caller ID API",
    description="Caller identification and spam likelihood lookup by name or phone number.",
    version="0.1.0",
    lifespan=lifespan,
)
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

for router in ROUTERS:
    app.include_router(router)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(_request: Request, exc: RequestValidationError):
    errors = []
    for err in exc.errors():
        message = str(err.get("msg", ""))
        if message.startswith(_VALUE_ERROR_PREFIX):
            message = message[len(_VALUE_ERROR_PREFIX):]
        errors.append({"message": message, "path": ".".join(str(p) for p in err.get("loc", ()))})
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"errors": errors})


@app.exception_handler(StoreError)
async def store_exception_handler(request: Request, exc: StoreError):
    logger.error("Store failure on %s %s: %s", request.method, request.url.path, exc, exc_info=exc)
    code = (
        status.HTTP_503_SERVICE_UNAVAILABLE
        if exc.kind is StoreErrorKind.UNAVAILABLE
        else status.HTTP_500_INTERNAL_SERVER_ERROR
    )
    return JSONResponse(status_code=code, content={"detail": GENERIC_ERROR_DETAIL})


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    detail = GENERIC_ERROR_DETAIL if get_settings().is_production else str(exc)
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"detail": detail})


@app.get("/health")
async def health():
    return {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}
