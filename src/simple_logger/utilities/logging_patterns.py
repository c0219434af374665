"""
Diagnostic logging for the simple_logger package.

The package never installs handlers; records go to whatever the host
application configured for the ``simple_logger`` namespace.
"""

import logging
from typing import Any


class StructuredLogger:
    def __init__(self, name: str, component: str | None = None):
        self.logger = logging.getLogger(name)
        self.component = component
        self.name = name

    def _prepare_extra_and_standard_kwargs(
        self, kwargs: dict[str, Any]
    ) -> tuple[dict[str, Any], dict[str, Any]]:
        standard_logging_kwargs = {"exc_info": None, "stack_info": False, "stacklevel": 1}

        extracted_kwargs: dict[str, Any] = {}
        extra_kwargs: dict[str, Any] = {}

        for key, value in kwargs.items():
            if key in standard_logging_kwargs:
                extracted_kwargs[key] = value
            else:
                extra_kwargs[key] = value

        if self.component:
            extra_kwargs["component"] = self.component

        return extracted_kwargs, extra_kwargs

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None:
        extracted_kwargs, extra_kwargs = self._prepare_extra_and_standard_kwargs(kwargs)
        self.logger.debug(msg, *args, extra=extra_kwargs, **extracted_kwargs)

    def warning(self, msg: str, *args: Any, **kwargs: Any) -> None:
        extracted_kwargs, extra_kwargs = self._prepare_extra_and_standard_kwargs(kwargs)
        self.logger.warning(msg, *args, extra=extra_kwargs, **extracted_kwargs)


def get_logger(name: str, component: str | None = None) -> StructuredLogger:
    return StructuredLogger(name, component=component)


__all__ = ["StructuredLogger", "get_logger"]
