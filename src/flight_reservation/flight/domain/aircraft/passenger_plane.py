from dataclasses import dataclass
from typing import ClassVar

from .passenger_aircraft import unrecognized_model


@dataclass(frozen=True)
class PassengerPlane:
    """旅客機"""

    model: str

    # モデル -> (乗客定員, 乗員定員)
    CAPACITIES: ClassVar[dict[str, tuple[int, int]]] = {
        "A380": (500, 42),
        "A350": (320, 40),
        "Embraer 190": (25, 5),
        "Antonov AN2": (15, 3),
    }

    def __post_init__(self) -> None:
        if self.model not in self.CAPACITIES:
            raise unrecognized_model(self.model)

    @property
    def passenger_capacity(self) -> int:
        return self.CAPACITIES[self.model][0]

    @property
    def crew_capacity(self) -> int:
        return self.CAPACITIES[self.model][1]
