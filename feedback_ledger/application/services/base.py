"""Logging mixin shared by the ledger services.

Services call ``_init_logger`` once in ``__init__`` and then take a
per-operation logger from ``_log_operation``::

    log = self._log_operation("submit", caller=caller)
    log.info("submission_accepted", submission_id=7)

Entries carry ``service`` (class name), ``component`` and ``operation``;
the correlation id is added by the structlog processor chain.
"""

import structlog

from feedback_ledger.infrastructure.observability.logging import (
    get_logger_for_service,
)


class LoggingMixin:
    """Structured logging for ledger services.

    Attributes:
        _log: Logger bound to the service class and component.
    """

    _log: structlog.BoundLogger

    def _init_logger(self, component: str = "ledger") -> None:
        self._log = get_logger_for_service(self.__class__.__name__, component)

    def _log_operation(self, operation: str, **context: object) -> structlog.BoundLogger:
        """Return a logger bound to one operation and its context."""
        return self._log.bind(operation=operation, **context)
