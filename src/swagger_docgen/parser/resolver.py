"""Locate the main API file across the source roots."""

from enum import Enum
from pathlib import Path
from typing import Protocol

from swagger_docgen.errors import ConfigurationError, ResolutionError


class GeneralInfoParser(Protocol):
    def parse_general_api_info(self, file_path: Path) -> None: ...


class MatchPolicy(str, Enum):
    """What to do when several roots contain the main API file."""

    ALL = "all"  # parse every match in root order; later roots override earlier ones
    FIRST = "first"


def resolve_main_api(
    parser: GeneralInfoParser,
    search_path: list[Path],
    main_api_file: str,
    policy: MatchPolicy = MatchPolicy.ALL,
) -> list[Path]:
    """Parse ``<root>/src/<main_api_file>`` for each root where it exists.

    Returns the parsed files in order. Raises ResolutionError naming the
    last attempted path when no root has the file.
    """
    if not search_path:
        raise ConfigurationError("The source search path is empty")

    parsed: list[Path] = []
    attempted = None
    for root in search_path:
        attempted = root / "src" / main_api_file
        if attempted.exists():
            parser.parse_general_api_info(attempted)
            parsed.append(attempted)
            if policy is MatchPolicy.FIRST:
                break

    if not parsed:
        raise ResolutionError(f"Could not find apifile {attempted} to parse")
    return parsed
