"""Route inclusion filtering.

Decides which Go functions are controller methods worth parsing for
route annotations.
"""

import re
from collections.abc import Callable
from dataclasses import dataclass

from swagger_docgen.errors import ConfigurationError


@dataclass(frozen=True)
class CandidateRoute:
    """A function declaration that may carry route annotations."""

    name: str
    receiver: str | None = None  # receiver type name, without '*'
    pointer_receiver: bool = False


RouteFilter = Callable[[CandidateRoute], bool]


def build_route_filter(pattern: str | None) -> RouteFilter:
    """Return a predicate for the given controller-class pattern.

    With no pattern every candidate is included. Otherwise only methods
    on a pointer receiver whose type name contains a match are included.
    The pattern is compiled here, once, so an invalid expression fails
    before any source is read.
    """
    if not pattern:
        return _include_all

    try:
        regex = re.compile(pattern)
    except re.error as e:
        raise ConfigurationError(
            f"The --controller-class argument is not a valid regular expression: {e}"
        ) from e

    def is_controller(route: CandidateRoute) -> bool:
        if route.receiver is None or not route.pointer_receiver:
            return False
        return regex.search(route.receiver) is not None

    return is_controller


def _include_all(route: CandidateRoute) -> bool:
    return True
