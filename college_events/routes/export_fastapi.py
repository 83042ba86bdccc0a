# -*- coding: utf-8 -*-
"""
CSV download of registrations for admins.
"""

import io
from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import StreamingResponse
from sqlalchemy.orm import Session

from college_events.auth import get_current_admin
from college_events.database import get_db
from college_events.services import reports

router = APIRouter(
    tags=["Export"],
    dependencies=[Depends(get_current_admin)],
)


@router.get("")
def export_registrations(event_id: Optional[int] = None, db: Session = Depends(get_db)):
    filename, content = reports.export_registrations(db, event_id=event_id)
    return StreamingResponse(
        io.BytesIO(content),
        media_type="text/csv; charset=utf-8",
        headers={
            "Content-Disposition": f'attachment; filename="{filename}"',
            "Pragma": "no-cache",
            "Expires": "0",
        },
    )
