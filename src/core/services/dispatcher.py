"""Ejecución de descriptores contra un transporte HTTP.

El `Dispatcher` hace una sola cosa: tomar un descriptor, hacer exactamente una
llamada HTTP y devolver exactamente un `Outcome`. No reintenta, no encola y no
lanza excepciones (`Exception`) hacia el caller: todo error de dispatch se
entrega como `Failure`.
"""

from __future__ import annotations

import asyncio
from typing import Callable

import structlog

from core.domain.outcome import Failure, Outcome, Success
from core.domain.requests import HttpMethod
from core.interfaces.request import RequestDescriptor
from core.interfaces.transport import HttpTransport

logger = structlog.get_logger(__name__)

OutcomeCallback = Callable[[Outcome], None]


class Dispatcher:
    """Ejecuta descriptores usando el transporte inyectado."""

    def __init__(self, transport: HttpTransport) -> None:
        self._transport = transport
        # El loop solo guarda referencias débiles a las tareas.
        self._tasks: set[asyncio.Task[Outcome]] = set()

    async def perform_request(self, request: RequestDescriptor) -> Outcome:
        """Ejecuta `request` y devuelve su único `Outcome`."""

        log = logger
        try:
            method = HttpMethod(request.method())
            url = request.url()
            log = logger.bind(method=method.value, url=url)
            body = request.encoded_body()
            log.debug("control_request_dispatched", has_body=body is not None)
            response = await self._transport.send(method.value, url, request.headers(), body)
        except Exception as exc:
            log.warning(
                "control_request_failed",
                error=type(exc).__name__,
                detail=str(exc),
                status_code=getattr(exc, "status_code", None),
            )
            return Failure(cause=exc)

        log.debug(
            "control_request_succeeded",
            status_code=response.status_code,
            size=len(response.content),
        )
        return Success(content=response.content, status_code=response.status_code)

    def dispatch(
        self,
        request: RequestDescriptor,
        on_outcome: OutcomeCallback | None = None,
    ) -> asyncio.Task[Outcome]:
        """Programa `request` en el loop actual (fire-and-forget).

        `on_outcome` recibe el resultado una sola vez cuando la tarea termina.
        Requiere un event loop en ejecución.
        """

        task = asyncio.create_task(self.perform_request(request))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        if on_outcome is not None:
            task.add_done_callback(lambda done: _deliver(done, on_outcome))
        return task


def _deliver(task: asyncio.Task[Outcome], on_outcome: OutcomeCallback) -> None:
    if task.cancelled():
        return
    try:
        on_outcome(task.result())
    except Exception:
        logger.exception("outcome_callback_failed")
