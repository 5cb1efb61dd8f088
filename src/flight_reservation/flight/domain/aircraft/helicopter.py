from dataclasses import dataclass
from typing import ClassVar

from .passenger_aircraft import unrecognized_model


@dataclass(frozen=True)
class Helicopter:
    """ヘリコプター（乗員は常に2名）"""

    model: str

    PASSENGER_CAPACITIES: ClassVar[dict[str, int]] = {"H1": 4, "H2": 6}

    def __post_init__(self) -> None:
        if self.model not in self.PASSENGER_CAPACITIES:
            raise unrecognized_model(self.model)

    @property
    def passenger_capacity(self) -> int:
        return self.PASSENGER_CAPACITIES[self.model]

    @property
    def crew_capacity(self) -> int:
        return 2
