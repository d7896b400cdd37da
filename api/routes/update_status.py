"""GET /api/v1/update-status endpoint.

Returns every installed project on the report with its release status label
and the filter categories it falls under.  No filtering happens here; the
categories are what the browser-side filter matches against.
"""

import sqlite3

from fastapi import APIRouter, Depends

from api.database import get_db, load_projects
from api.models import ProjectOut

router = APIRouter(prefix="/update-status", tags=["update-status"])


@router.get(
    "",
    response_model=list[ProjectOut],
    summary="Installed projects and their update status",
)
def list_projects(conn: sqlite3.Connection = Depends(get_db)) -> list[ProjectOut]:
    return [ProjectOut(**row) for row in load_projects(conn)]
