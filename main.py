import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from app import config
from app.storage import MemStorage, DuplicateRecordError, InvalidUpdateError
from app.seed import seed_sample_data
from app.auth.routes import router as auth_router
from app.users.routes import router as users_router
from app.lawyers.routes import router as lawyers_router
from app.cases.routes import router as cases_router
from app.consultations.routes import router as consultations_router
from app.news.routes import router as news_router
from app.lawdata.routes import router as lawdata_router
from app.chat.routes import router as chat_router
from app.payments.routes import router as payments_router
from app.legalaid.routes import router as legalaid_router
from app.documents.routes import router as documents_router
from app.realtime.routes import router as realtime_router

# Setup logging
logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=config.APP_NAME,
    description="Case tracking, lawyer discovery, consultations and legal information",
    version=config.APP_VERSION
)

# One store per process, handed to routes through app.database.get_db
app.state.storage = MemStorage()
if config.SEED_SAMPLE_DATA:
    seed_sample_data(app.state.storage)


# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- Add middleware for COOP/COEP headers ---
class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        response: Response = await call_next(request)
        response.headers["Cross-Origin-Opener-Policy"] = "same-origin-allow-popups"
        response.headers["Cross-Origin-Embedder-Policy"] = "unsafe-none"
        return response

app.add_middleware(SecurityHeadersMiddleware)


# --- Error handlers ---
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Invalid input data", "errors": jsonable_encoder(exc.errors())},
    )

@app.exception_handler(DuplicateRecordError)
async def duplicate_record_handler(request: Request, exc: DuplicateRecordError):
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)})

@app.exception_handler(InvalidUpdateError)
async def invalid_update_handler(request: Request, exc: InvalidUpdateError):
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)})

@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Server error"},
    )


# Include routers
app.include_router(auth_router)
app.include_router(users_router)
app.include_router(lawyers_router)
app.include_router(cases_router)
app.include_router(consultations_router)
app.include_router(news_router)
app.include_router(lawdata_router)
app.include_router(chat_router)
app.include_router(payments_router)
app.include_router(legalaid_router)
app.include_router(documents_router)
app.include_router(realtime_router)


@app.get("/")
def root():
    return {
        "message": "LegalConnect API",
        "version": config.APP_VERSION,
        "status": "running"
    }

@app.get("/health")
def health_check():
    return {"status": "healthy"}
