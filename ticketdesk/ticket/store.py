# ticketdesk/ticket/store.py
"""In-memory ticket storage. Lives only for the duration of a run."""

from ticketdesk.ticket.models import Ticket, TicketStatus


class TicketStore:
    def __init__(self):
        self._tickets: list[Ticket] = []
        self._next_id = 1

    def add(self, title: str, description: str) -> Ticket:
        """Create a ticket and keep it in memory.

        Raises ValueError for an empty title; no id is consumed in that case.
        """
        ticket = Ticket(self._next_id, title, description)
        self._next_id += 1
        self._tickets.append(ticket)
        return ticket

    def get_all(self) -> list[Ticket]:
        # copy so callers can't change what we hold
        return list(self._tickets)

    def get_by_id(self, ticket_id: int) -> Ticket | None:
        return next((t for t in self._tickets if t.id == ticket_id), None)

    def change_status(self, ticket_id: int, status: TicketStatus) -> bool:
        ticket = self.get_by_id(ticket_id)
        if ticket is None:
            return False
        ticket.change_status(status)
        return True

    def __len__(self) -> int:
        return len(self._tickets)
