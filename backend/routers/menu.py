from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import HTMLResponse
from slowapi import Limiter
from slowapi.util import get_remote_address

from config import settings
from models.table import MenuItem, TableView
from services import menu_service
from services.country_service import CountryQueryEngine, get_engine
from services.table_service import render_rows_html

router = APIRouter(prefix="/menu", tags=["menu"])

limiter = Limiter(key_func=get_remote_address)


def _dispatch(engine: CountryQueryEngine, item_id: str) -> TableView:
    try:
        return menu_service.dispatch(engine, item_id)
    except menu_service.UnknownMenuItemError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("", response_model=list[MenuItem])
async def list_menu(engine: CountryQueryEngine = Depends(get_engine)):
    return menu_service.menu_items(engine)


@router.get("/{item_id}", response_model=TableView)
@limiter.limit(settings.rate_limit)
async def menu_table(
    request: Request,
    item_id: str,
    engine: CountryQueryEngine = Depends(get_engine),
):
    return _dispatch(engine, item_id)


@router.get("/{item_id}/rows", response_class=HTMLResponse)
@limiter.limit(settings.rate_limit)
async def menu_table_rows(
    request: Request,
    item_id: str,
    engine: CountryQueryEngine = Depends(get_engine),
):
    table = _dispatch(engine, item_id)
    return HTMLResponse(render_rows_html(table.rows))
