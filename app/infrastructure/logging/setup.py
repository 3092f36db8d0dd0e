"""Structlog setup for the templates component.

``configure_logging`` runs once on import; modules then take a bound logger:

    from infrastructure.logging import get_module_logger

    logger = get_module_logger()
    logger.info("template_rendered", locale="fr")

Every entry carries the invocation scope bound by ``bind_invocation_context``
and the deployed ``GIT_SHA`` as ``release``.
"""

import inspect
import logging
import sys
from typing import Any, List, MutableMapping, Optional

import structlog
from structlog.stdlib import BoundLogger
from structlog.types import Processor

from infrastructure.configuration import settings

SILENT_LEVEL = logging.CRITICAL + 1


def _is_test_environment() -> bool:
    """True when running under pytest, where log output is suppressed."""
    return "pytest" in sys.modules


def _add_release(
    _logger: Any, _method: str, event_dict: MutableMapping[str, Any]
) -> MutableMapping[str, Any]:
    event_dict.setdefault("release", settings.GIT_SHA)
    return event_dict


def _shared_processors() -> List[Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        _add_release,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.CallsiteParameterAdder(
            parameters={
                structlog.processors.CallsiteParameter.MODULE,
                structlog.processors.CallsiteParameter.FUNC_NAME,
                structlog.processors.CallsiteParameter.LINENO,
            }
        ),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]


def _apply(processors: List[Processor], level: int, force: bool = False) -> BoundLogger:
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level, force=force)
    return structlog.stdlib.get_logger()


def configure_logging(
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BoundLogger:
    """Configure structlog on top of stdlib logging.

    Args:
        log_level: Level name overriding ``settings.LOG_LEVEL``.
        is_production: Overrides ``settings.is_production``; production
            renders JSON lines, development a coloured console.

    Returns:
        Root structlog logger.
    """
    if _is_test_environment():
        logging.root.setLevel(SILENT_LEVEL)
        silenced = [structlog.stdlib.add_log_level, structlog.processors.KeyValueRenderer()]
        return _apply(silenced, SILENT_LEVEL, force=True)

    production = settings.is_production if is_production is None else is_production
    renderer: Processor = (
        structlog.processors.JSONRenderer()
        if production
        else structlog.dev.ConsoleRenderer()
    )
    level_name = (log_level or settings.LOG_LEVEL).upper()
    level = logging.getLevelNamesMapping().get(level_name, logging.INFO)
    return _apply(_shared_processors() + [renderer], level)


logger: BoundLogger = configure_logging()


def get_module_logger() -> BoundLogger:
    """Logger bound to the calling module.

    Binds ``component`` (last segment of the module name) and
    ``module_path`` (the full dotted name), e.g. ``catalog`` and
    ``infrastructure.i18n.catalog``.
    """
    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    module = inspect.getmodule(caller) if caller is not None else None
    if module is None:
        return logger.bind(component="unknown")

    name = module.__name__
    return logger.bind(component=name.rsplit(".", 1)[-1], module_path=name)
