from __future__ import generator_stop

from typing import Any, TypeVar

from typing_extensions import Protocol


class Orderable(Protocol):
    def __lt__(self, other: Any) -> bool:
        ...

    def __le__(self, other: Any) -> bool:
        ...


class Multipliable(Protocol):
    def __mul__(self, other: Any) -> Any:
        ...


OrderableT = TypeVar("OrderableT", bound=Orderable)
MultipliableT = TypeVar("MultipliableT", bound=Multipliable)
