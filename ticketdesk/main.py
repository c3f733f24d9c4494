# ticketdesk/main.py
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ticketdesk.core.config import get_settings
from ticketdesk.core.logging import get_logger
from ticketdesk.ticket.controller import TicketController
from ticketdesk.ticket.routes import router as ticket_router

logger = get_logger(__name__)


def create_app(controller: TicketController | None = None) -> FastAPI:
    settings = get_settings()
    app = FastAPI(
        title=settings.APP_NAME,
        description=settings.APP_DESC,
        version=settings.APP_VERSION,
    )

    # one controller (and so one store) per app instance
    app.state.controller = controller if controller is not None else TicketController()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Routers
    app.include_router(ticket_router)

    @app.get("/health", tags=["Health"])
    def health():
        return {"status": "ok"}

    logger.info("App created", extra={"app_name": settings.APP_NAME})
    return app


app = create_app()
