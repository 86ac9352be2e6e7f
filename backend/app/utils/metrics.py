"""Prometheus metrics for scheduling, trip planning and recommendations."""

from prometheus_client import Counter, Histogram

schedule_instances_total = Counter(
    "schedule_instances_total",
    "Total scheduled tour instances produced by day queries",
)

trip_plans_built_total = Counter(
    "trip_plans_built_total",
    "Total trip plans built from selection sets",
    ["outcome"],
)

stale_selections_total = Counter(
    "stale_selections_total",
    "Selections dropped because their tour is no longer in the catalogue",
)

recommendations_served = Histogram(
    "recommendations_served",
    "Number of activities returned per gap recommendation",
    ["source"],
    buckets=[0, 1, 2, 3, 4, 5, 8],
)

catalogue_reads_total = Counter(
    "catalogue_reads_total",
    "Total catalogue fixture reads",
    ["resource", "language"],
)
