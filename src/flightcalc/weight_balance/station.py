"""Load station for weight and balance calculations.

A load station represents a point where weight can be added to the aircraft,
such as the fuel tanks, a row of seats, or a baggage area.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class LoadStation:
    """Represents a weight station in the aircraft.

    Load stations have a fixed arm (distance from datum). The weight loaded
    at a station is supplied per calculation, never stored on the station.

    Attributes:
        name: Station identifier (e.g., "front_seats", "fuel")
        arm_in: Distance from reference datum in inches
        station_type: Type of station ("seat", "cargo", "fuel")

    Examples:
        >>> front = LoadStation(name="front_seats", arm_in=37.0, station_type="seat")
        >>> front.calculate_moment(180.0)  # 180 lbs x 37 in
        6660.0
    """

    name: str
    arm_in: float
    station_type: str

    def calculate_moment(self, weight_lbs: float) -> float:
        """Calculate moment (weight x arm).

        Args:
            weight_lbs: Weight loaded at this station.

        Returns:
            Moment in pound-inches (lb-in).

        Note:
            Moment is used for CG calculation: CG = total_moment / total_weight
        """
        return weight_lbs * self.arm_in
