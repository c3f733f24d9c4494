# ticketdesk/ticket/routes.py
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from ticketdesk.core.config import Settings, get_settings
from ticketdesk.ticket.controller import TicketController, TicketListResult
from ticketdesk.ticket.schemas import ResultOut, StatusChange, TicketCreate, to_view

router = APIRouter(prefix="/tickets", tags=["Tickets"])


def get_controller(request: Request) -> TicketController:
    return request.app.state.controller


def render(result: TicketListResult, settings: Settings, ok_status: int = 200) -> JSONResponse:
    """Turn a controller result into the envelope the client displays."""
    data = None
    if result.data is not None:
        data = [to_view(dto, settings.DATE_FORMAT) for dto in result.data]
    body = ResultOut(success=result.success, message=result.message, data=data)
    return JSONResponse(
        status_code=ok_status if result.success else 400,
        content=body.model_dump(mode="json"),
    )


@router.get("", response_model=ResultOut)
def list_all(
    controller: TicketController = Depends(get_controller),
    settings: Settings = Depends(get_settings),
):
    return render(controller.get_tickets(), settings)


@router.post("", response_model=ResultOut, status_code=201)
def create(
    ticket: TicketCreate,
    controller: TicketController = Depends(get_controller),
    settings: Settings = Depends(get_settings),
):
    result = controller.create_ticket(ticket.title, ticket.description)
    return render(result, settings, ok_status=201)


@router.put("/{ticket_id}/status", response_model=ResultOut)
def change_status(
    ticket_id: int,
    payload: StatusChange,
    controller: TicketController = Depends(get_controller),
    settings: Settings = Depends(get_settings),
):
    return render(controller.change_status(ticket_id, payload.status), settings)


@router.post("/{ticket_id}/toggle", response_model=ResultOut)
def toggle(
    ticket_id: int,
    controller: TicketController = Depends(get_controller),
    settings: Settings = Depends(get_settings),
):
    return render(controller.toggle_status(ticket_id), settings)
