"""Form registry: look up form classes by their form id."""

from api.forms.base import FormBase, FormState, RequestContext
from api.forms.update_status_filter import FORM_ID as UPDATE_STATUS_FORM_ID
from api.forms.update_status_filter import UpdateStatusFilterForm


class FormNotFoundError(LookupError):
    """Raised when no form is registered under the requested id."""


FORMS: dict[str, type[FormBase]] = {
    UPDATE_STATUS_FORM_ID: UpdateStatusFilterForm,
}


def get_form(form_id: str) -> FormBase:
    """Return a new instance of the form registered as *form_id*."""
    try:
        return FORMS[form_id]()
    except KeyError:
        raise FormNotFoundError(f"No form registered as {form_id!r}") from None


__all__ = [
    "FORMS",
    "FormBase",
    "FormNotFoundError",
    "FormState",
    "RequestContext",
    "UPDATE_STATUS_FORM_ID",
    "UpdateStatusFilterForm",
    "get_form",
]
