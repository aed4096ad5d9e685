"""Request Dependencies - hands the service logger to route handlers.

Invariants:
    - The logger is built once by create_app and stored on app.state
    - Handlers never import a module-level logger for outcome lines
"""

from fastapi import Request

from calculator.infrastructure.observability import ServiceLogger


def get_service_logger(request: Request) -> ServiceLogger:
    return request.app.state.service_logger
