from pathlib import Path

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from wunderview.config import get_settings
from wunderview.exceptions import ConfigurationError
from wunderview.services.wunderlist import get_client

templates = Jinja2Templates(directory=Path(__file__).resolve().parent.parent / "templates")

router = APIRouter(tags=["views"])


def _render_list(request: Request, list_id: int) -> HTMLResponse:
    tasks = get_client().get_list_tasks(list_id)
    return templates.TemplateResponse(
        request, "list.html", {"tasks": tasks, "list_id": list_id},
    )


@router.get("/", response_class=HTMLResponse)
def configured_list(request: Request):
    """Render the tasks of the list set in WUNDERLIST_LIST_ID."""
    list_id = get_settings().wunderlist_list_id
    if list_id is None:
        raise ConfigurationError("No list configured. Set WUNDERLIST_LIST_ID in .env")
    return _render_list(request, list_id)


@router.get("/lists/{list_id}", response_class=HTMLResponse)
def list_page(request: Request, list_id: int):
    return _render_list(request, list_id)
