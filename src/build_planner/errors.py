"""Exceptions raised while generating a build plan.

All errors derive from both ``BuildPlannerError`` and ``ValueError`` so that
callers can catch either the package-specific base or the generic class.
"""


class BuildPlannerError(ValueError):
    """Base class for fatal build plan errors."""


class DateParseError(BuildPlannerError):
    """An explicit snapshot date could not be parsed.

    Attributes:
        text: The offending date text, verbatim.
    """

    def __init__(self, text: str, source: str = "DESCRIPTION file") -> None:
        self.text = text
        super().__init__(f"Unable to parse date in {source}: {text}")


class CyclicRequirementError(BuildPlannerError):
    """A package appears among its own transitive requirements."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Cyclic software requirement detected at package '{name}'")


class ManifestError(BuildPlannerError):
    """A project manifest is malformed."""


class UnsupportedProjectError(BuildPlannerError):
    """No runtime plugin applies to a project."""
