"""Gap-filling recommender: short activities for free time between tours.

Two deterministic greedy passes, in this order:
1. Interest pass - activities sharing the most interests with the visitor,
   at most one per activity type.
2. Diversity pass - first fitting activity of each unused type from
   DIVERSITY_ORDER, in catalogue order.
There is no third pass; fewer than `count` results is a normal outcome.
"""

from collections.abc import Collection, Sequence

from backend.app.adapters.fixtures import load_activities
from backend.app.models.activity import Activity
from backend.app.models.common import ActivityType, InterestCategory
from backend.app.utils.logging import trip_logger
from backend.app.utils.metrics import recommendations_served

# Walking/transition margin added to every activity; fixed, never waived
TRANSITION_BUFFER_MINUTES = 15

# Indoor and shopping are reachable only through the interest pass
DIVERSITY_ORDER: tuple[ActivityType, ...] = (
    ActivityType.cafe,
    ActivityType.museum,
    ActivityType.walk,
    ActivityType.attraction,
    ActivityType.viewpoint,
)


def fits_gap(activity: Activity, gap_minutes: int) -> bool:
    """True if the activity plus the transition buffer fits in the gap."""
    return activity.duration_minutes + TRANSITION_BUFFER_MINUTES <= gap_minutes


def interest_overlap(activity: Activity, user_interests: Collection[InterestCategory]) -> int:
    """Number of the visitor's interests the activity matches."""
    return len(set(activity.interests) & set(user_interests))


def recommend(
    gap_minutes: int,
    count: int,
    user_interests: Collection[InterestCategory] = (),
    activities: Sequence[Activity] | None = None,
) -> list[Activity]:
    """Pick up to `count` type-diverse activities that fit a gap.

    Args:
        gap_minutes: Free time available
        count: Maximum number of activities to return
        user_interests: Visitor interest tags, may be empty
        activities: Activity catalogue (defaults to the fixture catalogue)

    Returns:
        Ordered activities, no two sharing a type
    """
    if activities is None:
        activities = load_activities()

    eligible = [a for a in activities if fits_gap(a, gap_minutes)]
    result: list[Activity] = []
    used_types: set[ActivityType] = set()

    if user_interests:
        matches = [a for a in eligible if interest_overlap(a, user_interests) > 0]
        matches.sort(key=lambda a: interest_overlap(a, user_interests), reverse=True)
        for activity in matches:
            if len(result) >= count:
                break
            if activity.type not in used_types:
                result.append(activity)
                used_types.add(activity.type)

    for activity_type in DIVERSITY_ORDER:
        if len(result) >= count:
            break
        if activity_type in used_types:
            continue
        first = next((a for a in eligible if a.type == activity_type), None)
        if first is not None:
            result.append(first)
            used_types.add(activity_type)

    recommendations_served.labels(source="gap").observe(len(result))
    trip_logger.log_recommendation("gap", gap_minutes, count, len(result))
    return result


def rank_activities(
    gap_minutes: int,
    exclude_types: Collection[ActivityType] = (),
    user_interests: Collection[InterestCategory] = (),
    activities: Sequence[Activity] | None = None,
) -> list[Activity]:
    """All fitting activities, best interest match first, then tightest fit."""
    if activities is None:
        activities = load_activities()

    suitable = [a for a in activities if fits_gap(a, gap_minutes) and a.type not in exclude_types]
    ranked = sorted(
        suitable,
        key=lambda a: (-interest_overlap(a, user_interests), gap_minutes - a.duration_minutes),
    )

    recommendations_served.labels(source="ranked").observe(len(ranked))
    trip_logger.log_recommendation("ranked", gap_minutes, len(suitable), len(ranked))
    return ranked
