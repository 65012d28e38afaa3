from functools import lru_cache
from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

router = APIRouter()

INDEX_HTML = Path(__file__).resolve().parent.parent / "frontend" / "index.html"


@lru_cache(maxsize=1)
def _index_page() -> str:
    return INDEX_HTML.read_text(encoding="utf-8")


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
def index():
    return HTMLResponse(_index_page())
