import logging
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import APIRouter, FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles

from .config import BASE_DIR, get_gemini_api_key, get_gemini_model, get_log_level
from .routers import translate

logger = logging.getLogger("translator")

STATIC_DIR = BASE_DIR / "static"
MISSING_PARAMETERS_MESSAGE = "Missing required parameters"


@asynccontextmanager
async def lifespan(_: FastAPI):
    load_dotenv()
    logging.basicConfig(
        level=getattr(logging, get_log_level().upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    if not get_gemini_api_key():
        logger.error("Gemini API Key not found. Please set the GEMINI_API_KEY environment variable.")
    logger.info("Translator starting up with model %s", get_gemini_model())
    yield


app = FastAPI(
    title="Translator API",
    version="0.1.0",
    description="Zero-shot and many-shot text translation backed by Gemini",
    lifespan=lifespan,
)


def _is_missing(error: dict) -> bool:
    if error["type"] in {"missing", "string_too_short"}:
        return True
    return error.get("input") in ("", None)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    if not errors or any(_is_missing(error) for error in errors):
        message = MISSING_PARAMETERS_MESSAGE
    elif errors[0]["type"] == "json_invalid":
        message = "Request body is not valid JSON"
    else:
        first = errors[0]
        field = ".".join(str(part) for part in first["loc"] if part != "body") or "body"
        message = f"Invalid value for {field}: {first['msg']}"
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": message})


api_router = APIRouter(prefix="/api")
api_router.include_router(translate.router)


@app.get("/health", include_in_schema=False)
@api_router.get("/health", tags=["health"])
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/", include_in_schema=False)
def landing_page() -> FileResponse:
    return FileResponse(STATIC_DIR / "index.html")


app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")
app.include_router(api_router)
