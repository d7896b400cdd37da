"""
Client library registry.

Form elements attach client behaviour by library name.  This module maps
those names to the JS/CSS assets they ship and the libraries they depend on,
and turns the names attached to a built form into the ordered asset URLs the
page template emits in ``<head>``.
"""

from dataclasses import dataclass, field
from typing import Iterable, Mapping

from api.models import FormElement


class UnknownLibraryError(LookupError):
    """Raised when an element attaches a library that is not registered."""


@dataclass(frozen=True)
class Library:
    name: str
    js: tuple[str, ...] = ()
    css: tuple[str, ...] = ()
    dependencies: tuple[str, ...] = field(default_factory=tuple)


LIBRARIES: dict[str, Library] = {
    lib.name: lib
    for lib in (
        Library(
            name="module_filter/table_filter",
            js=("js/table_filter.js",),
        ),
        Library(
            name="module_filter/update.status",
            js=("js/update_status.js",),
            css=("css/update_status.css",),
            dependencies=("module_filter/table_filter",),
        ),
    )
}


def collect_libraries(elements: Mapping[str, FormElement]) -> list[str]:
    """Return library names attached anywhere in *elements*, in tree order."""
    seen: list[str] = []

    def _walk(nodes: Mapping[str, FormElement]) -> None:
        for element in nodes.values():
            for name in element.libraries:
                if name not in seen:
                    seen.append(name)
            _walk(element.children)

    _walk(elements)
    return seen


def resolve(names: Iterable[str]) -> list[Library]:
    """Expand *names* into libraries, dependencies first, each listed once."""
    ordered: list[Library] = []
    visiting: set[str] = set()

    def _visit(name: str) -> None:
        if any(lib.name == name for lib in ordered) or name in visiting:
            return
        try:
            lib = LIBRARIES[name]
        except KeyError:
            raise UnknownLibraryError(f"Unknown client library: {name!r}") from None
        visiting.add(name)
        for dep in lib.dependencies:
            _visit(dep)
        visiting.discard(name)
        ordered.append(lib)

    for name in names:
        _visit(name)
    return ordered


def asset_urls(names: Iterable[str], static_prefix: str = "/static") -> dict[str, list[str]]:
    """Return ``{"js": [...], "css": [...]}`` URLs for the given libraries."""
    prefix = static_prefix.rstrip("/")
    urls: dict[str, list[str]] = {"js": [], "css": []}
    for lib in resolve(names):
        urls["js"].extend(f"{prefix}/{path}" for path in lib.js)
        urls["css"].extend(f"{prefix}/{path}" for path in lib.css)
    return urls
