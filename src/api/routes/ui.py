"""Browser UI for running analyses."""

from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

router = APIRouter(tags=["UI"])

INDEX_PATH = Path(__file__).resolve().parent.parent / "static" / "index.html"


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def index() -> HTMLResponse:
    """Serve the analysis form."""
    return HTMLResponse(INDEX_PATH.read_text(encoding="utf-8"))
