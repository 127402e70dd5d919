# Load .env file BEFORE other imports (so env vars are available)
from dotenv import load_dotenv
load_dotenv()

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import HTMLResponse, JSONResponse

from commit_feed.artifacts import render_commits_page
from commit_feed.config import CommitFeedConfig
from commit_feed.errors import problem_response
from commit_feed.logging_utils import log_event
from commit_feed.middleware import request_id_middleware
from commit_feed.pipeline import collect_commits


app = FastAPI()

#Register middleware
app.middleware("http")(request_id_middleware)


def get_config() -> CommitFeedConfig:
    """Read per request so env changes apply without a restart; tests override this."""
    return CommitFeedConfig.from_env()


def cache_headers(cfg: CommitFeedConfig) -> dict[str, str]:
    return {"Cache-Control": f"max-age={cfg.cache_max_age}"}


@app.get("/health")
def health(request: Request):
    request_id = request.state.request_id
    log_event("health_check", request_id=request_id)
    return {"status": "ok"}


@app.get("/commits")
def list_commits(request: Request, count: int | None = None, cfg: CommitFeedConfig = Depends(get_config)):
    if count is not None:
        if count < 0:
            raise HTTPException(status_code=400, detail="count must be >= 0")
        cfg = cfg.model_copy(update={"count": count})

    commits = collect_commits(cfg)
    log_event("commits_served", request_id=request.state.request_id, count=len(commits), format="json")

    return JSONResponse(
        content={
            "count": len(commits),
            "items": [c.model_dump(mode="json") for c in commits],
        },
        headers=cache_headers(cfg),
    )


@app.get("/commits/html", response_class=HTMLResponse)
def commits_html(request: Request, cfg: CommitFeedConfig = Depends(get_config)) -> HTMLResponse:
    commits = collect_commits(cfg)
    log_event("commits_served", request_id=request.state.request_id, count=len(commits), format="html")
    return HTMLResponse(content=render_commits_page(commits), headers=cache_headers(cfg))


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    rid = request.state.request_id
    log_event("http_error", request_id=rid, status=exc.status_code, detail=str(exc.detail))
    return problem_response(status=exc.status_code, code="http_error", message=str(exc.detail), request_id=rid)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Return ProblemDetails for query parameter validation errors."""
    rid = request.state.request_id

    errors = exc.errors()
    if errors:
        first = errors[0]
        loc = ".".join(str(x) for x in first.get("loc", []))  #e.g., "query.count"
        message = f"{loc}: {first.get('msg', 'Validation error')}"
    else:
        message = "Validation error"

    log_event("validation_error", request_id=rid, message=message)
    return problem_response(status=422, code="validation_error", message=message, request_id=rid)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    rid = getattr(request.state, "request_id", "")
    # Don't leak details to the client, but do log them
    log_event("unhandled_exception", request_id=rid, error_type=type(exc).__name__, error=str(exc))
    return problem_response(status=500, code="internal_error", message="Internal server error", request_id=rid)
