from dataclasses import dataclass


@dataclass(frozen=True)
class Airport:
    """空港（IATA 3レターコード + 名称 + 所在地）"""

    code: str
    name: str
    location: str

    def __post_init__(self) -> None:
        code = self.code.strip().upper()
        if len(code) != 3 or not code.isalpha():
            raise ValueError(f"Invalid airport code: {self.code}")
        object.__setattr__(self, "code", code)

    def __str__(self) -> str:
        return self.code
