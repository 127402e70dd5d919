from fastapi.responses import JSONResponse
from pydantic import BaseModel


class ProblemDetails(BaseModel):
    status: int
    code: str
    message: str
    request_id: str


def problem(*, status: int, code: str, message: str, request_id: str) -> ProblemDetails:
    return ProblemDetails(status=status, code=code, message=message, request_id=request_id)


def problem_response(*, status: int, code: str, message: str, request_id: str) -> JSONResponse:
    """ProblemDetails body with the request id echoed in X-Request-ID."""
    payload = problem(status=status, code=code, message=message, request_id=request_id)
    return JSONResponse(status_code=status, content=payload.model_dump(), headers={"X-Request-ID": request_id})
