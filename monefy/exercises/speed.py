"""Remote controlled cars racing on tracks."""

from dataclasses import dataclass, replace

FULL_BATTERY = 100


@dataclass(frozen=True)
class Car:
    """A remote controlled car and its current state."""

    speed: int
    battery_drain: int
    battery: int = FULL_BATTERY
    distance: int = 0


@dataclass(frozen=True)
class Track:
    """A race track of a given length."""

    distance: int


def new_car(speed: int, battery_drain: int) -> Car:
    """Return a car with a full battery that has not moved yet."""
    return Car(speed=speed, battery_drain=battery_drain)


def new_track(distance: int) -> Track:
    """Return a track of the given length."""
    return Track(distance=distance)


def drive(car: Car) -> Car:
    """Return the car after driving once; it stays put if the battery would run flat."""
    if car.battery - car.battery_drain <= 0:
        return car
    return replace(
        car,
        battery=car.battery - car.battery_drain,
        distance=car.distance + car.speed,
    )


def can_finish(car: Car, track: Track) -> bool:
    """Return whether the car's battery lasts for the whole track."""
    drives_needed = track.distance // car.speed
    return car.battery - drives_needed * car.battery_drain >= 0