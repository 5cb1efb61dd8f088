from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from flight_reservation.shared.config import ReservationSettings


@dataclass(frozen=True)
class NoFlyList:
    """搭乗禁止リスト

    顧客名と乗客名の両方と照合する。生成後は変更できない。
    """

    names: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        object.__setattr__(self, "names", frozenset(self.names))

    def __contains__(self, name: object) -> bool:
        return name in self.names

    @classmethod
    def of(cls, names: Iterable[str]) -> NoFlyList:
        return cls(names=frozenset(names))

    @classmethod
    def from_settings(cls, settings: ReservationSettings) -> NoFlyList:
        return cls.of(settings.no_fly_list)
