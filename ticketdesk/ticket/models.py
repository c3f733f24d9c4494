# ticketdesk/ticket/models.py
from datetime import datetime
from enum import Enum


class TicketStatus(str, Enum):
    OPEN = "open"
    CLOSED = "closed"


class Ticket:
    """A support request. Only the store creates tickets."""

    def __init__(self, id: int, title: str, description: str = ""):
        title = (title or "").strip()
        if not title:
            raise ValueError("Ticket title cannot be empty")

        self._id = id
        self._title = title
        self._description = (description or "").strip()
        self._status = TicketStatus.OPEN
        self._created_at = datetime.now()

    @property
    def id(self) -> int:
        return self._id

    @property
    def title(self) -> str:
        return self._title

    @property
    def description(self) -> str:
        return self._description

    @property
    def status(self) -> TicketStatus:
        return self._status

    @property
    def created_at(self) -> datetime:
        return self._created_at

    def change_status(self, new_status: TicketStatus) -> None:
        # any transition is allowed, including closed -> closed
        self._status = new_status

    def __repr__(self) -> str:
        return f"Ticket(id={self._id!r}, title={self._title!r}, status={self._status.value!r})"
