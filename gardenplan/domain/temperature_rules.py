"""Seasonal date estimation from monthly temperature ranges.

Pure functions: "today" is passed in by the caller.
"""

import math
from datetime import date
from typing import Sequence

from gardenplan.models.schema_models import MonthlyTemperatureRangeSchema, TemperatureSchema

# Interpolated days are kept inside every month.
DAYS_PER_MONTH_FOR_INTERPOLATION = 28
FALLBACK_DAY_OF_MONTH = 15


def to_celsius(temperature: TemperatureSchema) -> float:
    if temperature.unit == "F":
        return (temperature.value - 32) * (5 / 9)
    return temperature.value


def monthly_average_c(month_range: MonthlyTemperatureRangeSchema) -> float:
    return (to_celsius(month_range.min) + to_celsius(month_range.max)) / 2


def _year_for(month: int, today: date) -> int:
    # Months already behind us this year point at next year.
    return today.year + 1 if month < today.month else today.year


def estimate_date(
    monthly: Sequence[MonthlyTemperatureRangeSchema],
    target: TemperatureSchema,
    today: date,
) -> date:
    """Estimate when the monthly average temperature first reaches ``target``.

    Months are scanned in calendar order. The day inside the matching month is
    interpolated linearly from the previous month's average; without a cooler
    previous month the 1st is used. If no month gets warm enough, the 15th of
    the warmest month is returned.

    Raises:
        ValueError: ``monthly`` is empty
    """
    if not monthly:
        raise ValueError("No monthly temperatures to estimate from")

    target_c = to_celsius(target)
    ordered = sorted(monthly, key=lambda m: m.month)
    by_month = {m.month: m for m in ordered}

    for month_range in ordered:
        average_c = monthly_average_c(month_range)
        if average_c < target_c:
            continue

        day_of_month = 1
        previous = by_month.get(month_range.month - 1)
        if previous is not None:
            previous_c = monthly_average_c(previous)
            if previous_c < target_c:
                fraction = (target_c - previous_c) / (average_c - previous_c)
                day_of_month = max(
                    1,
                    min(
                        DAYS_PER_MONTH_FOR_INTERPOLATION,
                        math.floor(fraction * DAYS_PER_MONTH_FOR_INTERPOLATION + 0.5),
                    ),
                )
        return date(_year_for(month_range.month, today), month_range.month, day_of_month)

    warmest = max(ordered, key=monthly_average_c)
    return date(_year_for(warmest.month, today), warmest.month, FALLBACK_DAY_OF_MONTH)
