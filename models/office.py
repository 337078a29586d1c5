import math


def parse_coordinate(value):
    """Strict float for seeded office coordinates; NaN and infinities are rejected."""
    number = float(value)
    if not math.isfinite(number):
        raise ValueError(f"Coordinate must be a finite number, got {value!r}")
    return number


class Office:

    def __init__(self, name, latitude, longitude):
        self.name = name
        self.latitude = parse_coordinate(latitude)
        self.longitude = parse_coordinate(longitude)

    @classmethod
    def parse(cls, spec):
        """Build an office from a "name:lat:lng" string (used by the seed command)."""
        name, sep, coords = spec.rpartition(":")
        name, sep2, lat = name.rpartition(":")
        if not (sep and sep2 and name):
            raise ValueError(f"Bad office spec: {spec!r} (expected name:lat:lng)")
        try:
            return cls(name, lat, coords)
        except ValueError as e:
            raise ValueError(f"Bad office spec: {spec!r} ({e})") from e

    def to_dict(self):
        return {
            "name": self.name,
            "latitude": self.latitude,
            "longitude": self.longitude,
        }
