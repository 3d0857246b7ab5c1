"""任务列表页面路由

GET /: 任务列表（同 /views/tasks）
GET /views/tasks: 分页任务列表
GET /views/tasks/{key}: 分页任务列表 + 选中任务表单
"""

from pathlib import Path

from fastapi import APIRouter, Depends, Query, Request
from fastapi import Path as PathParam
from fastapi.responses import HTMLResponse
from starlette.templating import Jinja2Templates
from tasklist.core.config import (
    DEFAULT_PAGE_SIZE,
    MAX_PAGE,
    MAX_PAGE_SIZE,
    SQLITE_MAX_INT,
)
from tasklist.core.models import PageRequest

from ..deps import get_form_renderer, get_store_group
from ..services.view_service import TASK_LIST_VIEW, TaskViewService

router = APIRouter()

templates = Jinja2Templates(directory=Path(__file__).resolve().parents[1] / "templates")


def get_page_request(
    page: int = Query(default=0, ge=0, le=MAX_PAGE, description="页码，从 0 开始"),
    size: int = Query(
        default=DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE, description="每页条数"
    ),
    sort: str | None = Query(default=None, description="排序，如 timestamp,desc"),
) -> PageRequest:
    """从查询参数构建 PageRequest"""
    return PageRequest(page=page, size=size, sort=sort)


async def _render_task_list(
    request: Request,
    page: PageRequest,
    selected_key: int | None,
    store_group,
    renderer,
) -> HTMLResponse:
    service = TaskViewService(store_group.task_store, renderer)
    model = await service.task_list(page, selected_key)

    return templates.TemplateResponse(
        request,
        TASK_LIST_VIEW,
        {**model, "size": page.size, "sort": page.sort, "basePath": request.url.path},
    )


@router.get("/", response_class=HTMLResponse)
async def index(
    request: Request,
    page: PageRequest = Depends(get_page_request),
    store_group=Depends(get_store_group),
    renderer=Depends(get_form_renderer),
):
    """首页 -- 任务列表"""
    return await _render_task_list(request, page, None, store_group, renderer)


@router.get("/views/tasks", response_class=HTMLResponse)
async def task_list(
    request: Request,
    page: PageRequest = Depends(get_page_request),
    store_group=Depends(get_store_group),
    renderer=Depends(get_form_renderer),
):
    """分页任务列表"""
    return await _render_task_list(request, page, None, store_group, renderer)


@router.get("/views/tasks/{key}", response_class=HTMLResponse)
async def task_detail(
    request: Request,
    key: int = PathParam(ge=0, le=SQLITE_MAX_INT, description="任务 key"),
    page: PageRequest = Depends(get_page_request),
    store_group=Depends(get_store_group),
    renderer=Depends(get_form_renderer),
):
    """分页任务列表，选中 key 对应任务并渲染其表单"""
    return await _render_task_list(request, page, key, store_group, renderer)
