"""
Form descriptor API.

GET /api/v1/forms/{form_id} returns the form's element tree as JSON, built
for the request's query string.  POST runs the submit pipeline on a JSON
object of values and reports the resulting state.
"""

from typing import Any

from fastapi import APIRouter, Body, HTTPException, Request

from api.forms import FormNotFoundError, RequestContext, get_form
from api.forms.base import FormBase
from api.models import FormOut, FormStateOut

router = APIRouter(prefix="/forms", tags=["forms"])


def _lookup(form_id: str) -> FormBase:
    try:
        return get_form(form_id)
    except FormNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc


@router.get(
    "/{form_id}",
    response_model=FormOut,
    summary="Build a form",
    responses={404: {"description": "No form registered under this id"}},
)
def build_form(form_id: str, request: Request) -> FormOut:
    """Return the element tree for *form_id*, built for the query string."""
    form = _lookup(form_id)
    return request.app.state.form_builder.build(form, RequestContext.from_request(request))


@router.post(
    "/{form_id}",
    response_model=FormStateOut,
    summary="Submit a form",
    responses={404: {"description": "No form registered under this id"}},
)
def submit_form(
    form_id: str,
    request: Request,
    values: dict[str, Any] = Body(...),
) -> FormStateOut:
    """Run validate and submit for *form_id* and return the outcome."""
    form = _lookup(form_id)
    state = request.app.state.form_builder.submit(
        form, RequestContext.from_request(request), values
    )
    return FormStateOut(
        form_id=form.identify(),
        values=state.values,
        errors=state.errors,
        redirect=state.redirect,
    )
