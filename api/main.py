"""
FastAPI application for the customer list.

This application provides:
1. POST /Customer - append a batch of customers
2. GET /Customer - list every stored customer in sort order
3. GET /health - liveness and record count

Run with:
    uv run uvicorn api.main:app --reload

Then visit http://localhost:8000/docs for interactive API documentation.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import Body, Depends, FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse

from customers.config import Settings, get_settings
from customers.data_store import CustomerStore
from customers.errors import CustomerValidationError, InvalidRequestError
from customers.models import Customer

# Configure logging
logging.basicConfig(
    level=get_settings().log_level,
    format="%(asctime)s | %(name)-24s | %(levelname)-5s | %(message)s",
    datefmt="%H:%M:%S",
)

logger = logging.getLogger("customers.api")


def get_store(request: Request) -> CustomerStore:
    """Get the store owned by the running application."""
    return request.app.state.store


def create_app(
    store: Optional[CustomerStore] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    """
    Build the application.

    Args:
        store: Store to serve. When omitted, one is loaded at startup from
               the configured storage file.
        settings: Settings to use instead of the environment.
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application startup and shutdown."""
        if getattr(app.state, "store", None) is None:
            app.state.store = CustomerStore(settings.storage_file)
        logger.info(f"Serving {len(app.state.store)} customers from {app.state.store.storage_file}")
        yield
        logger.info("Shutting down")

    app = FastAPI(
        title="Customer List API",
        description="Append and list customer records kept sorted by name and stored as JSON.",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.store = store

    @app.exception_handler(RequestValidationError)
    async def malformed_body(request: Request, exc: RequestValidationError):
        """Report unparseable bodies as 400 like any other bad input."""
        lines = []
        for error in exc.errors():
            location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
            lines.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
        return PlainTextResponse("\n".join(lines), status_code=400)

    # =========================================================================
    # Health Check
    # =========================================================================

    @app.get("/health", tags=["Health"])
    def health_check(store: CustomerStore = Depends(get_store)):
        """Health check endpoint."""
        return {"status": "healthy", "service": "customers-api", "customers": len(store)}

    # =========================================================================
    # Customer Endpoints
    # =========================================================================

    @app.post("/Customer", tags=["Customers"])
    def add_customers(
        customers: Optional[list[Customer]] = Body(default=None),
        store: CustomerStore = Depends(get_store),
    ):
        """
        Append a batch of customers.

        Valid records are inserted in (lastName, firstName) order even when
        other records in the batch are rejected; the response then still
        carries a 400 listing the rejected ones.
        """
        try:
            store.add_customers(customers)
        except InvalidRequestError as e:
            return PlainTextResponse(str(e), status_code=400)
        except CustomerValidationError as e:
            if e.inserted:
                logger.info(f"Batch partially applied: {len(e.inserted)} inserted, {len(e.errors)} rejected")
            return PlainTextResponse("\n".join(e.errors), status_code=400)
        except Exception:
            logger.exception("Error processing customers")
            return PlainTextResponse("An error occurred while processing the request.", status_code=500)

        return Response(status_code=200)

    @app.get("/Customer", response_model=list[Customer], tags=["Customers"])
    def list_customers(store: CustomerStore = Depends(get_store)):
        """Get all customers, sorted by last name then first name."""
        try:
            return store.get_customers()
        except Exception:
            logger.exception("Error getting customers")
            return PlainTextResponse("An error occurred while retrieving customers.", status_code=500)

    return app


app = create_app()
