"""
Metrics engine - progress and schedule estimates for a project.

Pure functions over a project and its stories. Nothing here fetches,
caches or logs; Project exposes each function as a method bound to its
own stories.

Day and iteration counts always round up: a partial day of work still
occupies a day. Percentages round half away from zero to one decimal.
"""

import math
from datetime import date, timedelta
from decimal import Decimal, ROUND_HALF_UP
from fractions import Fraction
from typing import Optional

from .errors import DivisionByZero, VelocityEqualToZero, VelocityNeverStarted

DAYS_PER_WEEK = 7
WORKING_DAYS_PER_WEEK = 5


def _sum_points(stories) -> int:
    # Unestimated stories weigh nothing
    return sum(story.points or 0 for story in stories)


def total_points(stories) -> int:
    """Sum of the points of every story."""
    return _sum_points(stories)


def remaining_points(stories) -> int:
    """Sum of the points of stories that are not completed."""
    return _sum_points(stories.not_completed())


def accepted_points(stories) -> int:
    """Points already delivered: total minus remaining."""
    return total_points(stories) - remaining_points(stories)


def percent_complete(stories) -> float:
    """
    Share of accepted points, in percent, to one decimal.

    Raises:
        DivisionByZero: if the stories carry no points at all
    """
    total = total_points(stories)
    if total == 0:
        raise DivisionByZero("percent complete is undefined for a project without points")

    percent = Decimal(accepted_points(stories)) * 100 / Decimal(total)
    return float(percent.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def estimated_velocity_per_day(project) -> float:
    return project.estimated_velocity / float(DAYS_PER_WEEK)


def estimated_velocity_per_working_day(project) -> float:
    return project.estimated_velocity / float(WORKING_DAYS_PER_WEEK)


def _periods_needed(project, stories, periods_per_iteration: int) -> int:
    """ceil(remaining / (velocity / periods)), computed exactly."""
    if project.estimated_velocity == 0:
        raise VelocityEqualToZero(project)
    quotient = Fraction(remaining_points(stories) * periods_per_iteration, project.estimated_velocity)
    return math.ceil(quotient)


def remaining_days(project, stories) -> int:
    """
    Calendar days (weekends included) left at the estimated velocity.

    Raises:
        VelocityEqualToZero: if nobody is working on the project
    """
    return _periods_needed(project, stories, DAYS_PER_WEEK)


def remaining_working_days(project, stories) -> int:
    """
    Billable days (weekends excluded) left at the estimated velocity.

    Raises:
        VelocityEqualToZero: if nobody is working on the project
    """
    return _periods_needed(project, stories, WORKING_DAYS_PER_WEEK)


def remaining_iterations(project, stories) -> int:
    """
    Iterations left at the estimated velocity.

    Raises:
        VelocityEqualToZero: if nobody is working on the project
    """
    return _periods_needed(project, stories, 1)


def estimated_end_date(project, stories, today: Optional[date] = None) -> date:
    """Date the project should be done at the estimated velocity."""
    days = remaining_days(project, stories)
    return (today or date.today()) + timedelta(days=days)


def has_started(project) -> bool:
    """True once any iteration recorded a non-zero velocity."""
    return any(velocity != 0 for velocity in project.historic_velocity)


def last_non_null_velocity(project) -> int:
    """
    Most recent non-zero historic velocity.

    Raises:
        VelocityNeverStarted: if every historic velocity is zero
    """
    for velocity in reversed(project.historic_velocity):
        if velocity != 0:
            return velocity
    raise VelocityNeverStarted(project)
