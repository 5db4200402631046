from abc import ABC, abstractmethod


class ErrorReporter(ABC):
    """Forwards unexpected failures to an observability backend"""

    @abstractmethod
    def report(self, error: BaseException) -> None:
        pass
