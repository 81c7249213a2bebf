"""
Errors raised by vidscribe.

Everything a host should show to the person who asked for a summary or
transcript derives from UserFacingError. ValidationError means the input was
unsuitable; RemoteError means an upstream service is having trouble.
"""


class UserFacingError(Exception):
    """Base class for failures that are reported back to the requester."""


class ValidationError(UserFacingError):
    """The transcript is too short or too long for the requested operation."""


class RemoteError(UserFacingError):
    """A transcript, metadata or chat-completion call failed."""


class TranscriptNotFoundError(RemoteError):
    """The video has no transcript that can be fetched."""


class EmptyResponseError(RemoteError):
    """The chat-completion service answered without any usable choice."""


class ConfigurationError(ValueError):
    """A setting is missing or malformed."""


class MissingCredentialError(ConfigurationError):
    """An API key needed to build a client was not configured."""
