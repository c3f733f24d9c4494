# ticketdesk/ticket/controller.py
"""
Ticket use cases.

The controller sits between the view and the model: it validates input,
calls the store, maps entities to DTOs and wraps everything in an
OperationResult. User-triggerable failures never raise.
"""

from ticketdesk.core.logging import get_logger
from ticketdesk.core.result import OperationResult
from ticketdesk.ticket.schemas import TicketDto, TicketStatusDto, to_dto, to_dto_status, to_model_status
from ticketdesk.ticket.store import TicketStore

logger = get_logger(__name__)

TITLE_REQUIRED = "El título es obligatorio."
INVALID_SELECTION = "Debe seleccionar un ticket válido."
TICKET_NOT_FOUND = "No se encontró el ticket a modificar."
TICKET_CREATED = "Ticket creado correctamente."
LIST_LOADED = "Listado cargado."
STATUS_UPDATED = "Estado actualizado."

TicketListResult = OperationResult[list[TicketDto]]


def _is_valid_id(ticket_id) -> bool:
    return isinstance(ticket_id, int) and not isinstance(ticket_id, bool) and ticket_id > 0


class TicketController:
    def __init__(self, store: TicketStore | None = None):
        self._store = store if store is not None else TicketStore()

    @property
    def store(self) -> TicketStore:
        return self._store

    def _snapshot(self) -> list[TicketDto]:
        return [to_dto(t) for t in self._store.get_all()]

    def create_ticket(self, title: str | None, description: str | None = None) -> TicketListResult:
        if title is None or not str(title).strip():
            logger.warning("Ticket rejected", extra={"reason": "empty_title"})
            return TicketListResult.fail(TITLE_REQUIRED)

        title = str(title).strip()
        description = (description or "").strip()

        ticket = self._store.add(title, description)
        logger.info("Ticket created", extra={"ticket_id": ticket.id})

        return TicketListResult.ok(self._snapshot(), TICKET_CREATED)

    def get_tickets(self) -> TicketListResult:
        return TicketListResult.ok(self._snapshot(), LIST_LOADED)

    def change_status(self, ticket_id: int, status: TicketStatusDto) -> TicketListResult:
        if not _is_valid_id(ticket_id):
            logger.warning("Status change rejected", extra={"ticket_id": ticket_id, "reason": "invalid_id"})
            return TicketListResult.fail(INVALID_SELECTION)

        try:
            status = TicketStatusDto(status)
        except ValueError:
            logger.warning("Status change rejected", extra={"ticket_id": ticket_id, "reason": "invalid_status"})
            return TicketListResult.fail(INVALID_SELECTION)

        if not self._store.change_status(ticket_id, to_model_status(status)):
            logger.warning("Status change rejected", extra={"ticket_id": ticket_id, "reason": "not_found"})
            return TicketListResult.fail(TICKET_NOT_FOUND)

        logger.info("Ticket status changed", extra={"ticket_id": ticket_id, "status": status.value})
        return TicketListResult.ok(self._snapshot(), STATUS_UPDATED)

    def toggle_status(self, ticket_id: int) -> TicketListResult:
        """Flip a ticket between open and closed."""
        if not _is_valid_id(ticket_id):
            logger.warning("Status change rejected", extra={"ticket_id": ticket_id, "reason": "invalid_id"})
            return TicketListResult.fail(INVALID_SELECTION)

        ticket = self._store.get_by_id(ticket_id)
        if ticket is None:
            logger.warning("Status change rejected", extra={"ticket_id": ticket_id, "reason": "not_found"})
            return TicketListResult.fail(TICKET_NOT_FOUND)

        current = to_dto_status(ticket.status)
        target = TicketStatusDto.CLOSED if current == TicketStatusDto.OPEN else TicketStatusDto.OPEN
        return self.change_status(ticket_id, target)
