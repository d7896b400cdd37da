"""
Pydantic models for form field descriptors and API responses.

A form is described as an ordered tree of ``FormElement`` nodes keyed by
element name.  The same tree feeds the Jinja2 templates and the JSON API, so
the HTML page and ``/api/v1/forms/{form_id}`` always agree.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field


# ── Form field descriptors ────────────────────────────────────────────────────

class FormElement(BaseModel):
    """One node of a form's element tree."""
    type: Literal["container", "search", "radios"] = Field(
        ..., description="Element type", examples=["search"])
    title: str | None = Field(None, description="Label text", examples=["Filter projects"])
    title_display: Literal["before", "invisible"] | None = Field(
        None, description="'invisible' keeps the label for screen readers only")
    size: int | None = Field(None, description="Visible width in characters", examples=[30])
    placeholder: str | None = Field(None, description="Placeholder text")
    attributes: dict[str, Any] = Field(
        default_factory=dict,
        description="Extra HTML attributes; 'class' is a list of class names",
    )
    libraries: list[str] = Field(
        default_factory=list,
        description="Client libraries attached to this element",
        examples=[["module_filter/update.status"]],
    )
    default_value: str | None = Field(None, description="Initial value")
    options: dict[str, str] | None = Field(
        None, description="Ordered option value -> label (radios only)")
    children: dict[str, FormElement] = Field(
        default_factory=dict, description="Ordered child elements keyed by name")


FormElement.model_rebuild()


class FormOut(BaseModel):
    """A built form: its id, element tree, and every attached library."""
    form_id: str = Field(..., examples=["module_filter_update_status_form"])
    elements: dict[str, FormElement]
    libraries: list[str] = Field(default_factory=list)


class FormStateOut(BaseModel):
    """Outcome of running a form's validate/submit pipeline."""
    form_id: str
    values: dict[str, Any] = Field(default_factory=dict)
    errors: dict[str, str] = Field(default_factory=dict)
    redirect: str | None = None


# ── Report rows ───────────────────────────────────────────────────────────────

class ProjectOut(BaseModel):
    """An installed project row on the available-updates report."""
    name: str = Field(..., description="Machine name", examples=["node"])
    title: str = Field(..., description="Human-readable name", examples=["Node"])
    project_type: str = Field(..., description="core | module | theme", examples=["module"])
    installed_version: str | None = Field(None, examples=["10.2.3"])
    recommended_version: str | None = Field(None, examples=["10.2.5"])
    status: int = Field(..., description="Release status code", examples=[4])
    status_label: str = Field(..., examples=["Update available"])
    categories: list[str] = Field(
        default_factory=list,
        description="Filter categories besides 'all' this row belongs to",
        examples=[["updates"]],
    )
