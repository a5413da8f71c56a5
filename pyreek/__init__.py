"""pyreek: code smell detection for Ruby source."""

from .configuration import ReekConfig, load_configuration
from .detector_repository import DetectorRepository
from .errors import (
    BadDetectorConfigurationKeyInCommentError,
    BadDetectorConfigurationValueInCommentError,
    BadDetectorInCommentError,
    BaseError,
    ConfigurationError,
    EncodingError,
    GarbageDetectorConfigurationInCommentError,
    IncomprehensibleSourceError,
)
from .examiner import ErrorHandler, Examiner
from .logging_error_handler import LoggingErrorHandler
from .models import SmellWarning, SourceLocation

__version__ = "0.1.0"

__all__ = [
    "BadDetectorConfigurationKeyInCommentError",
    "BadDetectorConfigurationValueInCommentError",
    "BadDetectorInCommentError",
    "BaseError",
    "ConfigurationError",
    "DetectorRepository",
    "EncodingError",
    "ErrorHandler",
    "Examiner",
    "GarbageDetectorConfigurationInCommentError",
    "IncomprehensibleSourceError",
    "LoggingErrorHandler",
    "ReekConfig",
    "SmellWarning",
    "SourceLocation",
    "load_configuration",
]
