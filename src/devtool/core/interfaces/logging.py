from __future__ import annotations
"""Logger surface expected by the processing and io services."""

from typing import Any, Mapping, Optional, Protocol, runtime_checkable


@runtime_checkable
class LoggerLikeProtocol(Protocol):
    """The subset of `logging.Logger` that services call.

    Services accept any object with this shape, so tests can hand in a
    recording stub instead of a configured logger.
    """

    def debug(self, msg: str, *args: Any, extra: Optional[Mapping[str, Any]] = None) -> None: ...

    def warning(self, msg: str, *args: Any, extra: Optional[Mapping[str, Any]] = None) -> None: ...

    def error(self, msg: str, *args: Any, extra: Optional[Mapping[str, Any]] = None) -> None: ...
