"""Finds the smells in one piece of Ruby source."""

from __future__ import annotations

from operator import attrgetter
from typing import Any, Callable, Iterable, List, Optional, Protocol

from .context import build_context_tree
from .detector_repository import DetectorConfiguration, DetectorRepository
from .errors import (
    BaseError,
    ConfigurationError,
    EncodingError,
    IncomprehensibleSourceError,
)
from .logging import get_logger
from .models import SmellWarning
from .source.source_code import SourceCode, SyntaxTree


class ErrorHandler(Protocol):
    """Receives typed errors instead of having them raised."""

    def handle(self, error: BaseError) -> Any:
        """Deal with ``error``; the return value is ignored."""


class Examiner:
    """Runs the configured smell detectors over a source and caches the findings.

    Building an Examiner never fails. Reading, parsing and configuration
    problems surface on the first access to :attr:`smells`, either raised or
    handed to ``error_handler``; in the latter case no smells are reported.
    """

    def __init__(
        self,
        source: object,
        filter_by_smells: Optional[Iterable[str]] = None,
        configuration: Optional[DetectorConfiguration] = None,
        error_handler: Optional[ErrorHandler] = None,
        detector_repository_factory: Callable[
            ..., DetectorRepository
        ] = DetectorRepository,
    ) -> None:
        self._source = SourceCode.from_source(source)
        self._smell_types = None if filter_by_smells is None else list(filter_by_smells)
        self._configuration = configuration
        self._error_handler = error_handler
        self._repository_factory = detector_repository_factory
        self._smells: Optional[List[SmellWarning]] = None
        self.logger = get_logger("examiner")

    @property
    def origin(self) -> str:
        return self._source.origin

    @property
    def description(self) -> str:
        return self.origin

    @property
    def smells(self) -> List[SmellWarning]:
        if self._smells is None:
            self._smells = self._run()
        return self._smells

    @property
    def smells_count(self) -> int:
        return len(self.smells)

    @property
    def smelly(self) -> bool:
        return bool(self.smells)

    def _run(self) -> List[SmellWarning]:
        try:
            return self._examine()
        except BaseError as error:
            if self._error_handler is None:
                raise
            self.logger.debug(
                "Delegating %s for %s to error handler",
                type(error).__name__,
                self.origin,
            )
            self._error_handler.handle(error)
            return []

    def _examine(self) -> List[SmellWarning]:
        self.logger.debug("Examining %s", self.origin)
        tree = self._syntax_tree()
        overrides = DetectorRepository.override_resolver().resolve(tree)
        context = build_context_tree(tree, overrides)
        repository = self._detector_repository()
        smells = sorted(repository.examine(context), key=attrgetter("sort_key"))
        self.logger.debug("Found %d smell(s) in %s", len(smells), self.origin)
        return smells

    def _syntax_tree(self) -> SyntaxTree:
        try:
            return self._source.syntax_tree()
        except (EncodingError, IncomprehensibleSourceError):
            raise
        except UnicodeError as exc:
            raise EncodingError(self.origin, str(exc)) from exc
        except Exception as exc:
            message = str(exc) or type(exc).__name__
            raise IncomprehensibleSourceError(self.origin, message) from exc

    def _detector_repository(self) -> DetectorRepository:
        try:
            return self._repository_factory(
                smell_types=self._smell_types,
                configuration=self._configuration,
            )
        except ConfigurationError as exc:
            if exc.origin is not None:
                raise
            raise ConfigurationError(str(exc), origin=self.origin) from exc


__all__ = ["ErrorHandler", "Examiner"]
