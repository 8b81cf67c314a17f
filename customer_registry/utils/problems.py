from typing import Dict, List, Optional, Sequence

from fastapi.responses import JSONResponse

PROBLEM_MEDIA_TYPE = "application/problem+json"
VALIDATION_TITLE = "One or more validation errors occurred."

PROBLEM_TYPES = {
    400: "https://tools.ietf.org/html/rfc9110#section-15.5.1",
    404: "https://tools.ietf.org/html/rfc9110#section-15.5.5",
    409: "https://tools.ietf.org/html/rfc9110#section-15.5.10",
    422: "https://tools.ietf.org/html/rfc9110#section-15.5.21",
}

ErrorMap = Dict[str, List[str]]


def add_error(errors: ErrorMap, key: str, message: str) -> None:
    errors.setdefault(key, []).append(message)


def validation_errors(exc, skip_prefix: Sequence[str] = (), default_key: str = "body") -> ErrorMap:
    """Flatten a pydantic / FastAPI validation error into ``{field: [messages]}``"""
    errors: ErrorMap = {}
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ())]
        if loc and loc[0] in skip_prefix:
            loc = loc[1:]
        add_error(errors, ".".join(loc) or default_key, err["msg"])
    return errors


def problem_response(status_code: int, title: str, errors: Optional[ErrorMap] = None) -> JSONResponse:
    content = {
        "type": PROBLEM_TYPES.get(status_code, "about:blank"),
        "title": title,
        "status": status_code,
    }
    if errors is not None:
        content["errors"] = errors
    return JSONResponse(content=content, status_code=status_code, media_type=PROBLEM_MEDIA_TYPE)


def validation_problem(errors: ErrorMap, status_code: int = 400) -> JSONResponse:
    return problem_response(status_code, VALIDATION_TITLE, errors)
