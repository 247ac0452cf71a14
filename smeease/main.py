# smeease/main.py
import logging
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError
from starlette.exceptions import HTTPException as StarletteHTTPException

from smeease.config import settings
from smeease.database import init_db

load_dotenv()

# Router imports
from smeease.routes.employees import router as employees_router
from smeease.routes.suppliers import router as suppliers_router
from smeease.routes.products import router as products_router
from smeease.routes.sales import router as sales_router
from smeease.routes.payroll import periods_router, payslips_router
from smeease.routes.tax_documents import router as tax_documents_router

logger = logging.getLogger(__name__)

API_PREFIX = "/api"


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    yield


app = FastAPI(title="SMEease API", version="1.0.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Every error leaves the API as {"error": "<message>"}
@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    first = errors[0] if errors else {}
    field = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
    message = first.get("msg", "Invalid request")
    return JSONResponse(
        status_code=400,
        content={"error": f"{field}: {message}" if field else message},
    )


@app.exception_handler(IntegrityError)
async def integrity_error_handler(request: Request, exc: IntegrityError):
    logger.warning("Integrity error on %s %s: %s", request.method, request.url.path, exc.orig)
    return JSONResponse(status_code=409, content={"error": "Request conflicts with existing data"})


# Router registration
app.include_router(employees_router, prefix=API_PREFIX)
app.include_router(suppliers_router, prefix=API_PREFIX)
app.include_router(products_router, prefix=API_PREFIX)
app.include_router(sales_router, prefix=API_PREFIX)
app.include_router(periods_router, prefix=API_PREFIX)
app.include_router(payslips_router, prefix=API_PREFIX)
app.include_router(tax_documents_router, prefix=API_PREFIX)


@app.get("/")
def read_root():
    return {"message": "SMEease API is running"}


def run():
    import uvicorn

    logging.basicConfig(level=settings.LOG_LEVEL)
    uvicorn.run("smeease.main:app", host="0.0.0.0", port=4000)
