"""
Student Registry API — main entry point.
Creates FastAPI app, sets up lifespan (MongoDB client), CORS, request logging
middleware, exception handlers, registers all routes.
"""

import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, APIRouter, Request
from fastapi.middleware.cors import CORSMiddleware

from app.config import logger, DB_NAME, STAGE, HOST, PORT, get_cors_origins
from app.database import create_client, get_database
from app.errors import register_exception_handlers
from app.routes import register_all_routes


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager - opens/closes the MongoDB client"""
    logger.info(f"🚀 Student Registry starting up (stage={STAGE}, db={DB_NAME})...")
    client = create_client()
    app.state.db = get_database(client)
    logger.info("REGISTERED ROUTES: %s", [r.path for r in app.routes])

    yield

    logger.info("🛑 Student Registry shutting down...")
    client.close()


app = FastAPI(title="Student Registry API", lifespan=lifespan)

api_router = APIRouter()

# Register all route modules on the api_router
register_all_routes(api_router)

app.include_router(api_router)

register_exception_handlers(app)


# ============== REQUEST LOGGING MIDDLEWARE ==============

@app.middleware("http")
async def request_logging_middleware(request: Request, call_next):
    """Log method, path, status and latency for every request"""
    start_time = time.time()
    try:
        response = await call_next(request)
    except Exception as e:
        response_time_ms = int((time.time() - start_time) * 1000)
        logger.error(f"{request.method} {request.url.path} -> 500 ({response_time_ms}ms): {e}")
        raise

    response_time_ms = int((time.time() - start_time) * 1000)
    logger.info(f"{request.method} {request.url.path} -> {response.status_code} ({response_time_ms}ms)")
    return response


# ============== CORS ==============

app.add_middleware(
    CORSMiddleware,
    allow_credentials=True,
    allow_origins=get_cors_origins(),
    allow_methods=["*"],
    allow_headers=["*"],
)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host=HOST, port=PORT)
