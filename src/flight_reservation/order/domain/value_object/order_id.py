from __future__ import annotations

import uuid
from dataclasses import dataclass


@dataclass(frozen=True)
class OrderId:
    """注文ID（Value Object）"""

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("OrderId cannot be empty")

    def __str__(self) -> str:
        return self.value

    @classmethod
    def generate(cls) -> OrderId:
        return cls(value=f"order_{uuid.uuid4().hex}")
