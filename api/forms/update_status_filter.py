"""
Filter bar for the available-updates report.

Renders a search box and a status radio group above the ``#update-status``
table.  Rows are hidden in the browser by the ``module_filter/update.status``
library; the server never filters and submitting the form does nothing.
"""

from api.forms.base import FormBase, FormState, RequestContext
from api.models import FormElement
from utils.update_status import STATUS_OPTIONS, StatusFilter

FORM_ID = "module_filter_update_status_form"
TABLE_SELECTOR = "#update-status"
LIBRARY = "module_filter/update.status"


class UpdateStatusFilterForm(FormBase):
    """A form for filtering the update status report page."""

    def identify(self) -> str:
        return FORM_ID

    def build(self, context: RequestContext) -> dict[str, FormElement]:
        text = FormElement(
            type="search",
            title="Filter projects",
            title_display="invisible",
            size=30,
            placeholder="Filter by project",
            attributes={
                "class": ["table-filter-text"],
                "data-table": TABLE_SELECTOR,
                "autocomplete": "off",
            },
            libraries=[LIBRARY],
        )
        # An empty ?filter= counts as absent.
        if context.query.get("filter"):
            text.default_value = context.query["filter"]

        radios = FormElement(
            type="container",
            attributes={"class": ["module-filter-status"]},
            children={
                "show": FormElement(
                    type="radios",
                    default_value=StatusFilter.default().value,
                    options=dict(STATUS_OPTIONS),
                ),
            },
        )

        return {
            "filters": FormElement(
                type="container",
                attributes={"class": ["table-filter", "js-show"]},
                children={"text": text, "radios": radios},
            ),
        }

    def submit(self, state: FormState) -> None:
        # Filtering runs entirely client-side; there is nothing to save.
        pass
