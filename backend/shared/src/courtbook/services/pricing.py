"""Court pricing for a booked slot.

Courts are priced per hour; a slot of any duration is pro-rated from the
hourly rate and rounded half-up to whole currency units.
"""

import datetime as dt
from decimal import Decimal

from courtbook.models import InvalidArgumentError
from courtbook.utils.money import round_half_up

MINUTES_PER_HOUR = 60
MINUTES_PER_DAY = 24 * MINUTES_PER_HOUR


class PricingService:
    """Service for slot price and end-time calculations."""

    def calculate_court_price(self, hourly_rate: int, duration_minutes: int) -> int:
        """Price of a slot of ``duration_minutes`` on a court.

        Args:
            hourly_rate: Court price per hour
            duration_minutes: Slot duration in minutes

        Returns:
            Pro-rated price, e.g. 10000/h for 90 minutes -> 15000
        """
        if hourly_rate <= 0:
            raise InvalidArgumentError(
                "hourly_rate must be greater than 0",
                {"hourly_rate": hourly_rate},
            )
        if duration_minutes <= 0:
            raise InvalidArgumentError(
                "duration_minutes must be greater than 0",
                {"duration_minutes": duration_minutes},
            )

        return round_half_up(Decimal(hourly_rate) * duration_minutes / MINUTES_PER_HOUR)

    def calculate_end_time(self, start_time: dt.time, duration_minutes: int) -> dt.time:
        """End of a slot; slots running past midnight wrap around."""
        start = start_time.hour * MINUTES_PER_HOUR + start_time.minute
        total = (start + duration_minutes) % MINUTES_PER_DAY
        return dt.time(total // MINUTES_PER_HOUR, total % MINUTES_PER_HOUR)
