"""Schemas for /api/helprequest."""

from typing import Optional

from pydantic import NaiveDatetime

from app.schemas.common import CamelModel


class HelpRequestFields(CamelModel):
    requester_email: Optional[str] = None
    team_id: Optional[str] = None
    table_or_breakout_room: Optional[str] = None
    explanation: Optional[str] = None
    solved: bool = False
    request_time: Optional[NaiveDatetime] = None


class HelpRequestResponse(HelpRequestFields):
    id: int
