"""Release status codes and the report categories derived from them.

Each installed project on the available-updates report carries one release
status code.  The filter bar groups those codes into the categories offered
by its radio buttons; the client-side filter reads the categories from each
row's ``data-status`` attribute.
"""

from enum import Enum


# ── Release status codes ──────────────────────────────────────────────────────

NOT_SECURE = 1
REVOKED = 2
NOT_SUPPORTED = 3
NOT_CURRENT = 4
CURRENT = 5

NOT_CHECKED = -1
UNKNOWN = -2
NOT_FETCHED = -3
FETCH_PENDING = -4

_STATUS_LABELS: dict[int, str] = {
    NOT_SECURE:    "Security update required!",
    REVOKED:       "Revoked!",
    NOT_SUPPORTED: "Not supported!",
    NOT_CURRENT:   "Update available",
    CURRENT:       "Up to date",
    NOT_CHECKED:   "Not checked",
    UNKNOWN:       "Unknown",
    NOT_FETCHED:   "Not fetched",
    FETCH_PENDING: "Fetch pending",
}


# ── Filter categories ─────────────────────────────────────────────────────────

class StatusFilter(str, Enum):
    """Report categories offered by the filter bar, in display order."""

    ALL = "all"
    UPDATES = "updates"
    SECURITY = "security"
    UNSUPPORTED = "unsupported"

    @property
    def label(self) -> str:
        return _FILTER_LABELS[self]

    @classmethod
    def default(cls) -> "StatusFilter":
        return cls.ALL


_FILTER_LABELS: dict[StatusFilter, str] = {
    StatusFilter.ALL:         "All",
    StatusFilter.UPDATES:     "Update available",
    StatusFilter.SECURITY:    "Security update",
    StatusFilter.UNSUPPORTED: "Unsupported",
}

# Radio options keyed by value; insertion order is display order.
STATUS_OPTIONS: dict[str, str] = {f.value: f.label for f in StatusFilter}

_STATUS_CATEGORIES: dict[int, tuple[StatusFilter, ...]] = {
    NOT_CURRENT:   (StatusFilter.UPDATES,),
    NOT_SECURE:    (StatusFilter.UPDATES, StatusFilter.SECURITY),
    REVOKED:       (StatusFilter.SECURITY, StatusFilter.UNSUPPORTED),
    NOT_SUPPORTED: (StatusFilter.UNSUPPORTED,),
}


def status_categories(status: int) -> tuple[str, ...]:
    """Return the filter categories (besides ``all``) a status belongs to.

    Every row is shown under ``all``, so it is never listed here.  Statuses
    that carry no actionable information (current, unknown, not fetched...)
    map to an empty tuple.
    """
    return tuple(c.value for c in _STATUS_CATEGORIES.get(status, ()))


def status_label(status: int) -> str:
    """Human-readable text for a release status code."""
    return _STATUS_LABELS.get(status, _STATUS_LABELS[UNKNOWN])
