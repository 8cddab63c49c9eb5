"""
Wrapscan Exception Hierarchy

Centralized exception classes for wrapper extraction.
All wrapscan-specific exceptions inherit from WrapscanError.

Usage:
    from wrapscan.exceptions import MissingCapabilityError, SourceSyntaxError

    try:
        info = await parse_wrapper(path, "Counter")
    except SourceSyntaxError as e:
        logger.error(f"Invalid wrapper source: {e}")
"""


class WrapscanError(Exception):
    """Base exception for all wrapscan errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} ({self.details})"
        return self.message


# =============================================================================
# Source Errors
# =============================================================================


class SourceError(WrapscanError):
    """Base class for errors reading or parsing wrapper source."""

    pass


class SourceReadError(SourceError):
    """Wrapper source file could not be read."""

    def __init__(self, message: str, path: str | None = None):
        details = {"path": path} if path else {}
        super().__init__(message, details)
        self.path = path


class SourceSyntaxError(SourceError):
    """Wrapper source is not valid TypeScript."""

    def __init__(self, message: str, diagnostics: list[dict] | None = None):
        diagnostics = diagnostics or []
        details = {"diagnostics": diagnostics[:5]} if diagnostics else {}
        super().__init__(message, details)
        self.diagnostics = diagnostics


# =============================================================================
# Extraction Errors
# =============================================================================


class ExtractionError(WrapscanError):
    """Base class for errors while assembling wrapper metadata."""

    pass


class MissingCapabilityError(ExtractionError):
    """Wrapper class lacks a required static factory."""

    def __init__(self, class_name: str, capability: str):
        super().__init__(
            f"Wrapper {class_name} cannot be created from address",
            {"class_name": class_name, "capability": capability},
        )
        self.class_name = class_name
        self.capability = capability


# =============================================================================
# Artifact Errors
# =============================================================================


class ArtifactLookupError(WrapscanError):
    """Compiled artifact could not be read."""

    def __init__(self, message: str, class_name: str | None = None):
        details = {"class_name": class_name} if class_name else {}
        super().__init__(message, details)
        self.class_name = class_name


class ArtifactNotFoundError(ArtifactLookupError):
    """No compiled artifact is registered for the class."""

    pass
