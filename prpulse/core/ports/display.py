from typing import ContextManager, Protocol, runtime_checkable


@runtime_checkable
class Display(Protocol):
    def status(self, message: str) -> ContextManager[object]:
        ...

    def emit(self, text: str) -> None:
        ...
