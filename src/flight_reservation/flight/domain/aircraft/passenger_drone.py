from dataclasses import dataclass

from .passenger_aircraft import unrecognized_model


@dataclass(frozen=True)
class PassengerDrone:
    """無人旅客ドローン（HypaHype のみ）"""

    model: str

    def __post_init__(self) -> None:
        if self.model != "HypaHype":
            raise unrecognized_model(self.model)

    @property
    def passenger_capacity(self) -> int:
        return 4

    @property
    def crew_capacity(self) -> int:
        return 0
