# ticketdesk/ticket/schemas.py
from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field

from ticketdesk.ticket.models import Ticket, TicketStatus


class TicketStatusDto(str, Enum):
    """Status as the view sees it, decoupled from the domain enum."""

    OPEN = "open"
    CLOSED = "closed"


STATUS_LABELS = {
    TicketStatusDto.OPEN: "Abierto",
    TicketStatusDto.CLOSED: "Cerrado",
}


class TicketDto(BaseModel):
    id: int
    title: str
    description: str = ""
    status: TicketStatusDto
    created_at: datetime


class TicketCreate(BaseModel):
    title: str
    description: str | None = None


class StatusChange(BaseModel):
    status: TicketStatusDto


class TicketView(BaseModel):
    id: int
    title: str
    description: str
    status: TicketStatusDto
    status_label: str
    created_at_text: str


class ResultOut(BaseModel):
    success: bool
    message: str
    data: list[TicketView] | None = Field(default=None)


def to_dto(ticket: Ticket) -> TicketDto:
    return TicketDto(
        id=ticket.id,
        title=ticket.title,
        description=ticket.description,
        status=to_dto_status(ticket.status),
        created_at=ticket.created_at,
    )


def to_dto_status(status: TicketStatus) -> TicketStatusDto:
    return TicketStatusDto.OPEN if status == TicketStatus.OPEN else TicketStatusDto.CLOSED


def to_model_status(status: TicketStatusDto) -> TicketStatus:
    return TicketStatus.OPEN if status == TicketStatusDto.OPEN else TicketStatus.CLOSED


def to_view(dto: TicketDto, date_format: str) -> TicketView:
    return TicketView(
        id=dto.id,
        title=dto.title,
        description=dto.description,
        status=dto.status,
        status_label=STATUS_LABELS[dto.status],
        created_at_text=dto.created_at.strftime(date_format),
    )
