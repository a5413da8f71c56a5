"""Typed errors raised (or handed to an error handler) while examining source."""

from __future__ import annotations

from typing import Iterable, Optional

_DOCS_HINT = (
    "Please see the Reek docs for:\n"
    "  * how to configure Reek via source code comments\n"
    "  * what basic smell detectors are available\n"
)


class BaseError(RuntimeError):
    """Base class for every error an Examiner can report."""

    def __init__(self, message: str, *, origin: Optional[str] = None) -> None:
        super().__init__(message)
        self.origin = origin


class ConfigurationError(BaseError):
    """Raised for unknown detectors or options, or badly shaped option values."""

    def __init__(self, message: str, *, origin: Optional[str] = None) -> None:
        if origin is not None:
            message = f"{message} (while examining source '{origin}')"
        super().__init__(message, origin=origin)


class IncomprehensibleSourceError(BaseError):
    """Raised when the source cannot be turned into a syntax tree."""

    def __init__(self, origin: str, original_message: str = "") -> None:
        message = (
            f"Source '{origin}' cannot be processed by Reek.\n"
            "This is most likely either a problem in the source itself or a bug in "
            "your Reek configuration (config file or source code comments).\n"
            "Please double check your Reek configuration taking the original error "
            "below into account.\n"
        )
        if original_message:
            message += f"\nOriginal error:\n\n{original_message}\n"
        super().__init__(message, origin=origin)
        self.original_message = original_message


class EncodingError(BaseError):
    """Raised when the source cannot be decoded in its declared encoding."""

    def __init__(self, origin: str, original_message: str = "") -> None:
        message = (
            f"Source '{origin}' cannot be processed by Reek due to an encoding error "
            "in the source file.\n"
            "Please make sure the encoding declared by its magic comment (UTF-8 when "
            "none is given) matches the encoding the file is actually stored in.\n"
        )
        if original_message:
            message += f"\nOriginal error:\n\n{original_message}\n"
        super().__init__(message, origin=origin)
        self.original_message = original_message


class _CommentError(BaseError):
    """Shared shape for errors caused by a directive comment."""

    def __init__(
        self,
        message: str,
        *,
        origin: str,
        detector_name: str,
        line: int,
        original_comment: str,
    ) -> None:
        location = (
            f"The source is '{origin}' and the comment belongs to the expression "
            f"starting in line {line}.\n"
        )
        full = (
            f"{message}\n{location}"
            f"Here's the original comment:\n\n{original_comment}\n\n{_DOCS_HINT}"
        )
        super().__init__(full, origin=origin)
        self.detector_name = detector_name
        self.line = line
        self.original_comment = original_comment


class BadDetectorInCommentError(_CommentError):
    """Raised when a directive names a detector that does not exist."""

    def __init__(
        self, *, origin: str, detector_name: str, line: int, original_comment: str
    ) -> None:
        message = (
            f"Error: You are trying to configure an unknown smell detector "
            f"'{detector_name}' in one of your source code comments."
        )
        super().__init__(
            message,
            origin=origin,
            detector_name=detector_name,
            line=line,
            original_comment=original_comment,
        )


class GarbageDetectorConfigurationInCommentError(_CommentError):
    """Raised when a directive's payload is not a valid configuration mapping."""

    def __init__(
        self,
        *,
        origin: str,
        detector_name: str,
        line: int,
        original_comment: str,
        parse_message: str,
    ) -> None:
        message = (
            f"Error: You are trying to configure the smell detector '{detector_name}' "
            "in one of your source code comments with some garbage.\n"
            f"The configuration parser reported: {parse_message}"
        )
        super().__init__(
            message,
            origin=origin,
            detector_name=detector_name,
            line=line,
            original_comment=original_comment,
        )
        self.parse_message = parse_message


class BadDetectorConfigurationKeyInCommentError(_CommentError):
    """Raised when a directive sets options the detector does not understand."""

    def __init__(
        self,
        *,
        origin: str,
        detector_name: str,
        line: int,
        original_comment: str,
        offending_keys: Iterable[str],
    ) -> None:
        keys = sorted(offending_keys)
        message = (
            f"Error: You are trying to configure the smell detector '{detector_name}' "
            "in one of your source code comments with the unknown option(s) "
            f"{', '.join(repr(key) for key in keys)}."
        )
        super().__init__(
            message,
            origin=origin,
            detector_name=detector_name,
            line=line,
            original_comment=original_comment,
        )
        self.offending_keys = keys


class BadDetectorConfigurationValueInCommentError(_CommentError):
    """Raised when a directive gives an option a value of the wrong shape."""

    def __init__(
        self,
        *,
        origin: str,
        detector_name: str,
        line: int,
        original_comment: str,
        problem: str,
    ) -> None:
        message = (
            f"Error: You are trying to configure the smell detector '{detector_name}' "
            "in one of your source code comments with an invalid value.\n"
            f"{problem}"
        )
        super().__init__(
            message,
            origin=origin,
            detector_name=detector_name,
            line=line,
            original_comment=original_comment,
        )
        self.problem = problem


__all__ = [
    "BadDetectorConfigurationKeyInCommentError",
    "BadDetectorConfigurationValueInCommentError",
    "BadDetectorInCommentError",
    "BaseError",
    "ConfigurationError",
    "EncodingError",
    "GarbageDetectorConfigurationInCommentError",
    "IncomprehensibleSourceError",
]
