from prpulse.infra.logging.console import ConsoleLogger
from prpulse.infra.logging.logfire import LogfireLogger, configure_logfire

__all__ = ["ConsoleLogger", "LogfireLogger", "configure_logfire"]
