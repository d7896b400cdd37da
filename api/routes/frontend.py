"""
Frontend HTML routes for the available-updates report.

Routes:
    GET  /admin/reports/updates  → update_status.html (filter bar + report table)
    POST /admin/reports/updates  → run the filter form's submit pipeline, 303 back

The filter bar is built by FormBuilder and rendered above
``<table id="update-status">``.  Each row carries its filter categories in
``data-status`` for the client-side filter.
"""

import sqlite3

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from api.database import get_db, load_projects
from api.forms import UPDATE_STATUS_FORM_ID, RequestContext, get_form
from api.forms.builder import FormBuilder
from api.libraries import asset_urls

router = APIRouter(tags=["frontend"])

REPORT_PATH = "/admin/reports/updates"

# Templates instance is set by create_app() after mounting.
_templates: Jinja2Templates | None = None


def set_templates(t: Jinja2Templates) -> None:
    global _templates
    _templates = t


def _tmpl() -> Jinja2Templates:
    if _templates is None:
        raise RuntimeError("Templates not initialised; call set_templates() first")
    return _templates


def _builder(request: Request) -> FormBuilder:
    return request.app.state.form_builder


@router.get(REPORT_PATH, response_class=HTMLResponse, include_in_schema=False)
def update_status_report(
    request: Request,
    conn: sqlite3.Connection = Depends(get_db),
) -> HTMLResponse:
    """Available-updates report with the filter bar above the table."""
    context = RequestContext.from_request(request)
    form = _builder(request).build(get_form(UPDATE_STATUS_FORM_ID), context)
    assets = asset_urls(form.libraries, request.app.state.static_prefix)

    return _tmpl().TemplateResponse(
        request,
        "update_status.html",
        {
            "form":     form,
            "action":   context.url,
            "assets":   assets,
            "projects": load_projects(conn),
        },
    )


@router.post(REPORT_PATH, include_in_schema=False)
async def update_status_submit(request: Request) -> RedirectResponse:
    """Accept a filter bar submission and send the browser back to the report."""
    context = RequestContext.from_request(request)
    body = await request.form()
    values = {key: body.get(key) for key in body.keys()}
    state = _builder(request).submit(get_form(UPDATE_STATUS_FORM_ID), context, values)
    return RedirectResponse(
        url=state.redirect or REPORT_PATH,
        status_code=status.HTTP_303_SEE_OTHER,
    )
