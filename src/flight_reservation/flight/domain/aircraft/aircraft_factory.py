from typing import Callable

from .helicopter import Helicopter
from .passenger_aircraft import PassengerAircraft, unrecognized_model
from .passenger_drone import PassengerDrone
from .passenger_plane import PassengerPlane

_AIRCRAFT_TYPES: dict[str, Callable[[str], PassengerAircraft]] = {
    "PassengerPlane": PassengerPlane,
    "Helicopter": Helicopter,
    "PassengerDrone": PassengerDrone,
}


def create_aircraft(aircraft_type: str, model: str) -> PassengerAircraft:
    """機種名とモデル名から機体を生成する

    Raises:
        ValueError: 未知の機種、または機種に存在しないモデルの場合
    """
    constructor = _AIRCRAFT_TYPES.get(aircraft_type)
    if constructor is None:
        raise unrecognized_model(aircraft_type)
    return constructor(model)
