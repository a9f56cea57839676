"""Transcription error hierarchy.

Every failure a user can see derives from ``TranscriptionError``; its ``str()``
is the message shown in the results pane.
"""


class TranscriptionError(Exception):
    """Base for all failures surfaced to the user."""


class UserInputError(TranscriptionError):
    """The user asked for something the current selection cannot satisfy."""


class ImageReadError(UserInputError):
    """The selected file could not be read."""


class ConfigurationError(TranscriptionError):
    """A credential required by the remote service is missing."""


class EmptyResultError(TranscriptionError):
    """The remote call succeeded but returned no text."""


class TransportError(TranscriptionError):
    """The remote call itself failed; the original exception is kept on ``cause``."""

    def __init__(self, message: str, cause: BaseException) -> None:
        super().__init__(message)
        self.cause = cause
