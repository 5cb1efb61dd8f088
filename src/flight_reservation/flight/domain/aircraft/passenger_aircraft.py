from typing import Protocol, runtime_checkable


@runtime_checkable
class PassengerAircraft(Protocol):
    """乗客定員を公開する機体

    このプロトコルを満たさない機体（貨物機など）は定員が未定義とみなされる。
    """

    @property
    def model(self) -> str: ...

    @property
    def passenger_capacity(self) -> int: ...

    @property
    def crew_capacity(self) -> int: ...


def unrecognized_model(model: str) -> ValueError:
    return ValueError(f"Model type '{model}' is not recognized")
