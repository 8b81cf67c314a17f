### customer_registry/main.py
from contextlib import asynccontextmanager
from typing import Optional
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from customer_registry.api import customer_routes
from customer_registry.config import get_database_url, get_log_level, get_sql_echo
from customer_registry.crud.customer import CustomerCpfConflict
from customer_registry.db import build_engine, build_session_factory, create_db_and_tables
from customer_registry.utils.problems import problem_response, validation_errors, validation_problem

log = logging.getLogger(__name__)


def create_app(database_url: Optional[str] = None) -> FastAPI:
    """
    Build the API around its own engine and session factory.

    ``database_url`` falls back to the DATABASE_URL environment variable.
    Run with ``uvicorn customer_registry.main:create_app --factory``.
    """
    logging.basicConfig(
        level=get_log_level(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    engine = build_engine(database_url or get_database_url(), echo=get_sql_echo())

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        log.info("Starting DB setup...")
        await create_db_and_tables(engine)
        log.info("DB schema created.")
        yield
        await engine.dispose()

    app = FastAPI(
        title="Customer Registry API",
        version="1.0.0",
        description="Customers and their addresses.",
        lifespan=lifespan,
    )
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return validation_problem(validation_errors(exc, skip_prefix=("body", "path", "query")))

    @app.exception_handler(CustomerCpfConflict)
    async def cpf_conflict_handler(request: Request, exc: CustomerCpfConflict):
        return problem_response(409, "A customer with this cpf already exists.")

    app.include_router(customer_routes.router)
    return app


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("customer_registry.main:create_app", factory=True, host="0.0.0.0", port=8000)
