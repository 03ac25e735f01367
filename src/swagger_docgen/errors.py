"""Error taxonomy for documentation generation.

Every error raised by the pipeline derives from DocgenError so the CLI
can report it with a single handler.
"""


class DocgenError(Exception):
    """Base class for all generation failures."""


class ConfigurationError(DocgenError):
    """Invalid or missing configuration, reported before any I/O."""


class ResolutionError(DocgenError):
    """A source file or package could not be located under any root."""


class SerializationError(DocgenError):
    """The API model could not be serialised to JSON."""


class OutputError(DocgenError):
    """An output file or directory could not be written."""
