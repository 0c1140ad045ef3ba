import logging

from fastapi import FastAPI, HTTPException, Query
from pydantic import BaseModel

from revert_codes.config import get_settings
from revert_codes.errors import MalformedErrorString, RevertCodeError
from revert_codes.lifespan import build_application_lifespan
from revert_codes.tables import ERROR_CODES, ERROR_PREFIXES
from revert_codes.translate import compress, expand, explain_revert, find_codes

logger = logging.getLogger("revert_codes").getChild("http")


async def _announce_tables(_: FastAPI) -> None:
    settings = get_settings()
    logger.info(
        "Revert code service ready; build=%s log_level=%s",
        settings.build_version,
        settings.log_level,
    )


app = FastAPI(
    title="Revert Code Translator",
    description="Translate compact contract revert codes such as #P:008 to descriptive names and back.",
    lifespan=build_application_lifespan("revert-codes", startup_hook=_announce_tables),
)


class TranslationResponse(BaseModel):
    code: str
    full_error: str


class ExplainRequest(BaseModel):
    message: str


class ExplainResponse(BaseModel):
    message: str
    explained: str
    codes: list[str]


def _to_http_error(exc: RevertCodeError) -> HTTPException:
    status = 400 if isinstance(exc, MalformedErrorString) else 404
    return HTTPException(status_code=status, detail={"error": type(exc).__name__, "token": exc.token, "message": str(exc)})


@app.get("/health")
def health() -> dict:
    return {"status": "ok", "build_version": get_settings().build_version}


@app.get("/codes")
def list_codes() -> dict:
    return {"prefixes": dict(ERROR_PREFIXES), "codes": dict(ERROR_CODES)}


@app.get("/codes/expand", response_model=TranslationResponse)
def expand_code(code: str = Query(..., min_length=1)) -> TranslationResponse:
    try:
        full_error = expand(code)
    except RevertCodeError as exc:
        logger.info("Expand failed for %r: %s", code, exc)
        raise _to_http_error(exc) from exc
    return TranslationResponse(code=code, full_error=full_error)


@app.get("/codes/compress", response_model=TranslationResponse)
def compress_error(error: str = Query(..., min_length=1)) -> TranslationResponse:
    try:
        code = compress(error)
    except RevertCodeError as exc:
        logger.info("Compress failed for %r: %s", error, exc)
        raise _to_http_error(exc) from exc
    return TranslationResponse(code=code, full_error=error)


@app.post("/codes/explain", response_model=ExplainResponse)
def explain(req: ExplainRequest) -> ExplainResponse:
    return ExplainResponse(
        message=req.message,
        explained=explain_revert(req.message),
        codes=find_codes(req.message),
    )
