"""Path notation translation for displayed routes."""

REQUIRED_MARKER = ":"
OPTIONAL_MARKER = "?"


def translate_path(raw_path: str) -> str:
    """Convert router parameters to named placeholders.

    ``/users/:id/?:format`` becomes ``/users/{id}/{format}``. Segments
    without markers, empty segments and a bare ``?`` are kept as-is, so
    the segment count never changes.
    """
    segments = raw_path.split("/")
    for i, segment in enumerate(segments):
        if not segment:
            continue
        if segment[0] == REQUIRED_MARKER:
            segments[i] = "{" + segment[1:] + "}"
        elif segment[0] == OPTIONAL_MARKER and len(segment) > 1 and segment[1] == REQUIRED_MARKER:
            segments[i] = "{" + segment[2:] + "}"
    return "/".join(segments)
