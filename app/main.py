from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import config
from app.logger import get_logger
from app.lib.errors import StoryApiError
from app.features.health.router import router as health_router
from app.features.story.router import router as story_router
from app.features.vocab_quiz.router import router as vocab_quiz_router

log = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if not config.deepseek_api_key:
        # requests will fail with 500 until the key is set
        log.warning("DEEPSEEK_API_KEY is not set")
    log.info(
        f"rate limiting: {config.rate_limit_max_requests} requests / "
        f"{config.rate_limit_window_seconds}s per IP; upstream timeout {config.llm_timeout_seconds}s"
    )
    yield


app = FastAPI(title="Story Generator API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.allowed_origins,
    allow_credentials=config.allow_credentials,  # must stay False with allow_origins=["*"]
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health_router)
app.include_router(story_router)
app.include_router(vocab_quiz_router)


@app.exception_handler(StoryApiError)
async def story_api_error_handler(request: Request, exc: StoryApiError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_payload())


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    first = errors[0] if errors else {}
    loc = list(first.get("loc", ()))
    if loc and loc[0] == "body":
        loc = loc[1:]
    # JSON decode errors carry a character offset instead of a field name
    field = ".".join(str(p) for p in loc) if loc and isinstance(loc[0], str) else "body"
    log.info(f"rejected request to {request.url.path}: {field} {first.get('msg', '')}")
    return JSONResponse(
        status_code=400,
        content={
            "success": False,
            "error": f"Missing or invalid field: {field}",
            "field": field,
            "details": first.get("msg", "invalid value"),
        },
    )
