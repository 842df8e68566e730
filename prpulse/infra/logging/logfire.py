from typing import Any, Dict

import logfire

from prpulse.core.ports.logger import Logger

SERVICE_NAME = 'prpulse'


def configure_logfire(api_token: str, service_name: str = SERVICE_NAME) -> None:
    logfire.configure(
        token=api_token,
        service_name=service_name,
        console=False,
    )


class LogfireLogger(Logger):
    def __init__(self, name: str) -> None:
        self._name = name

    def debug(self, message: str, **kwargs: Any) -> None:
        logfire.debug(message, **self._attributes(kwargs))

    def info(self, message: str, **kwargs: Any) -> None:
        logfire.info(message, **self._attributes(kwargs))

    def warning(self, message: str, **kwargs: Any) -> None:
        logfire.warn(message, **self._attributes(kwargs))

    def error(self, message: str, **kwargs: Any) -> None:
        logfire.error(message, **self._attributes(kwargs))

    def exception(self, message: str, **kwargs: Any) -> None:
        logfire.exception(message, **self._attributes(kwargs))

    def _attributes(self, context: Dict[str, Any]) -> Dict[str, Any]:
        attributes = {key: value for key, value in context.items() if value is not None}
        attributes['logger'] = self._name
        return attributes
