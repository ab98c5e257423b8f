"""Build errors.

Every failure aborts the build; the CLI catches BuildError once and
reports it on stderr.
"""

from __future__ import annotations


class BuildError(Exception):
    """Base class for all build failures."""


class UsageError(BuildError):
    """Required --api selector was not supplied."""


class MissingTemplateError(BuildError):
    """The per-API template file does not exist."""


class MissingAssetError(BuildError):
    """The static viewer file does not exist."""


class ResolutionError(BuildError):
    """A placeholder could not be resolved.

    kind is one of NO_MAPPING, MISSING_VALUE or UNRECOGNIZED.
    """

    NO_MAPPING = "no_mapping"
    MISSING_VALUE = "missing_value"
    UNRECOGNIZED = "unrecognized"

    def __init__(self, kind: str, api: str, name: str, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.api = api
        self.name = name


class ArtifactWriteError(BuildError):
    """An output artifact could not be written."""
