from dataclasses import dataclass


@dataclass(frozen=True)
class Passenger:
    """乗客

    名前以外の識別子は持たない。搭乗禁止リストとの照合も名前の一致で行う。
    """

    name: str

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValueError("Passenger name cannot be empty")

    def __str__(self) -> str:
        return self.name
