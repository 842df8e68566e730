from abc import ABC, abstractmethod
from typing import Generic, TypeVar, final

from prpulse.core.exceptions import PrPulseError
from prpulse.core.ports.logger import Logger

T = TypeVar("T")


class BaseJob(ABC, Generic[T]):
    def __init__(self, logger: Logger) -> None:
        self._logger = logger

    @final
    def run(self) -> T:
        job_name = self.__class__.__name__
        self._logger.info("Job starting", job=job_name)
        try:
            return self.execute()
        except PrPulseError as error:
            self.handle_error(error)
            raise
        finally:
            self._logger.info("Job stopping", job=job_name)

    @abstractmethod
    def execute(self) -> T: ...

    def handle_error(self, error: PrPulseError) -> None:
        self._logger.error(
            "Job failed",
            error=str(error),
            error_type=type(error).__name__,
            job=self.__class__.__name__,
        )
