"""Builds store queries for the exercise log endpoint."""

from collections.abc import Mapping

from exercise_tracker.domain.logs import LogQuery
from exercise_tracker.services.validation import parse_limit, parse_optional_date


def build_log_query(params: Mapping[str, object]) -> LogQuery:
    """Translate ``from``/``to``/``limit`` parameters into a ``LogQuery``.

    Repositories apply the query on top of the owning user's id filter.
    """
    date_from = parse_optional_date(params.get("from"), 'Invalid "from" date format')
    date_to = parse_optional_date(params.get("to"), 'Invalid "to" date format')
    limit = parse_limit(params.get("limit"))
    return LogQuery(date_from=date_from, date_to=date_to, limit=limit)
