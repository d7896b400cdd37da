"""
Form building and submission pipeline.

FormBuilder sits between the routes and the forms:

  - ``build()`` calls ``form.build(context)``, gathers the attached client
    libraries, and caches the result keyed by form id plus query string.
  - ``submit()`` wraps submitted values in a FormState and runs
    validate -> submit.

Cached trees are never handed out directly; every caller gets a deep copy.
"""

import logging
import threading
import time
from typing import Any, Hashable, Mapping

from api.forms.base import FormBase, FormState, RequestContext
from api.libraries import collect_libraries
from api.models import FormOut

logger = logging.getLogger("update_status_api.forms")


class FormCache:
    """Thread-safe TTL cache for built forms.

    Entries expire after ``ttl_seconds``.  When ``maxsize`` entries are held
    the one expiring soonest is evicted.  A TTL of zero or less disables
    caching entirely.
    """

    def __init__(self, maxsize: int = 128, ttl_seconds: float = 300.0) -> None:
        self._maxsize = maxsize
        self._ttl = ttl_seconds
        # key -> (built form, expires_at)
        self._store: dict[Hashable, tuple[FormOut, float]] = {}
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0

    @property
    def enabled(self) -> bool:
        return self._ttl > 0 and self._maxsize > 0

    def get(self, key: Hashable) -> FormOut | None:
        with self._lock:
            entry = self._store.get(key)
            if entry is None:
                self._misses += 1
                return None
            built, expires_at = entry
            if time.monotonic() > expires_at:
                del self._store[key]
                self._misses += 1
                return None
            self._hits += 1
            return built

    def set(self, key: Hashable, built: FormOut) -> None:
        if not self.enabled:
            return
        expires_at = time.monotonic() + self._ttl
        with self._lock:
            if key not in self._store and len(self._store) >= self._maxsize:
                soonest = min(self._store, key=lambda k: self._store[k][1])
                del self._store[soonest]
            self._store[key] = (built, expires_at)

    def clear(self) -> None:
        with self._lock:
            self._store.clear()
            self._hits = 0
            self._misses = 0

    def stats(self) -> dict[str, int]:
        """Return ``hits``, ``misses`` and live ``size``."""
        with self._lock:
            now = time.monotonic()
            expired = [k for k, (_, exp) in self._store.items() if now > exp]
            for k in expired:
                del self._store[k]
            return {
                "hits": self._hits,
                "misses": self._misses,
                "size": len(self._store),
            }


def _cache_key(form_id: str, context: RequestContext) -> tuple:
    return (form_id, tuple(sorted(context.query.items())))


class FormBuilder:
    """Builds forms for requests and runs their submit pipeline."""

    def __init__(self, cache_ttl: float = 300.0, cache_size: int = 128) -> None:
        self.cache = FormCache(maxsize=cache_size, ttl_seconds=cache_ttl)

    def build(self, form: FormBase, context: RequestContext) -> FormOut:
        """Return the built form for *context* as an independent copy."""
        form_id = form.identify()
        key = _cache_key(form_id, context)
        built = self.cache.get(key) if self.cache.enabled else None
        if built is None:
            elements = form.build(context)
            built = FormOut(
                form_id=form_id,
                elements=elements,
                libraries=collect_libraries(elements),
            )
            self.cache.set(key, built)
            logger.debug("form_built form_id=%s path=%s", form_id, context.path)
        return built.model_copy(deep=True)

    def submit(
        self,
        form: FormBase,
        context: RequestContext,
        values: Mapping[str, Any],
    ) -> FormState:
        """Validate and submit *values*; return the resulting state.

        ``submit`` only runs when validation recorded no errors.  The
        redirect defaults to the page the form was posted from.
        """
        form_id = form.identify()
        state = FormState(values=dict(values), redirect=context.url)
        form.validate(state)
        if state.has_errors:
            logger.info(
                "form_invalid form_id=%s errors=%s", form_id, sorted(state.errors)
            )
            return state
        form.submit(state)
        logger.info("form_submitted form_id=%s", form_id)
        return state

    def clear(self) -> None:
        self.cache.clear()

    def stats(self) -> dict[str, int]:
        return self.cache.stats()
