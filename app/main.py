from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from loguru import logger
from starlette import status
from starlette.exceptions import HTTPException
from starlette.middleware.cors import CORSMiddleware
from starlette.responses import JSONResponse, RedirectResponse

from app.api.db.database import Database
from app.api.seed import seed_database
from app.config import dashboard_config
from app.logging import configure_logger
from app.transactions.router import router as transactions_router

configure_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    # setup
    db = Database(dashboard_config.db_url)
    await db.initialize()
    logger.info(f"Connected to database {dashboard_config.db_url}")

    await seed_database(db, dashboard_config.seed_url, dashboard_config.seed_timeout)
    app.state.db = db

    yield

    # cleanup
    await db.dispose()


app = FastAPI(title="Transaction Dashboard API", lifespan=lifespan)
app.include_router(transactions_router)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[dashboard_config.cors_origin],
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    return JSONResponse(
        {"error": exc.detail}, status_code=exc.status_code, headers=exc.headers
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.opt(exception=exc).error(f"Unhandled error on {request.url.path}: {exc}")
    return JSONResponse(
        {"error": str(exc)}, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
    )


@app.get("/", include_in_schema=False)
def index(req: Request):
    return RedirectResponse(
        "/docs",
        status_code=status.HTTP_307_TEMPORARY_REDIRECT,
    )
