"""Structlog logger factory for feedpush."""

import structlog


def get_struct_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger with the given name.

    Args:
        name: The logger name, usually __name__

    Returns:
        A bound structlog logger instance

    Note: log unexpected exceptions with ``logger.exception`` so the
    traceback is kept whether or not logging has been set up:
        try:
            # some operation
        except Exception as e:
            logger.exception("operation_failed", error=str(e))
    """
    return structlog.get_logger(name)  # type: ignore[no-any-return]
