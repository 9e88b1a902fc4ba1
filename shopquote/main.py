from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import logging

from .config import settings
from .errors import MaterialIntegrityError, NotFoundError, ValidationError
from .models import FieldError
from .routers import calculations, laser

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger("shopquote")

app = FastAPI(
    title="Shop Quoting API",
    description=f"Print and laser-cut quoting for {settings.COMPANY_NAME}",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ValidationError)
def handle_validation_error(request: Request, exc: ValidationError):
    logger.warning("Rejected %s: %s", request.url.path, exc)
    return JSONResponse(status_code=400, content=exc.to_dict())


@app.exception_handler(RequestValidationError)
def handle_request_validation_error(request: Request, exc: RequestValidationError):
    """Malformed or missing body fields use the same 400 shape as quote validation."""
    errors = []
    for err in exc.errors():
        names = [str(part) for part in err.get("loc", ()) if part != "body"]
        errors.append(FieldError(names[-1] if names else "body", err.get("msg", "invalid value")))
    return handle_validation_error(request, ValidationError(errors))


@app.exception_handler(NotFoundError)
def handle_not_found(request: Request, exc: NotFoundError):
    logger.warning("Not found on %s: %s", request.url.path, exc)
    return JSONResponse(status_code=404, content={"detail": str(exc)})


@app.exception_handler(MaterialIntegrityError)
def handle_bad_material(request: Request, exc: MaterialIntegrityError):
    logger.error("Material data integrity failure on %s: %s", request.url.path, exc)
    return JSONResponse(status_code=500, content={"detail": "Material data is invalid"})


# API routes
app.include_router(calculations.router, prefix="/api")
app.include_router(laser.router, prefix="/api")


@app.get("/health")
def health():
    return {"status": "ok", "app": "shopquote"}
