"""Inline ``:reek:`` directives turned into location-scoped detector overrides."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import (
    Any,
    Callable,
    Dict,
    FrozenSet,
    Iterable,
    Iterator,
    List,
    Mapping,
    Optional,
)

import yaml

from .errors import (
    BadDetectorConfigurationKeyInCommentError,
    BadDetectorConfigurationValueInCommentError,
    BadDetectorInCommentError,
    ConfigurationError,
    GarbageDetectorConfigurationInCommentError,
)
from .logging import get_logger
from .models import SourceLocation
from .source.code_comment import CodeComment, Directive
from .source.source_code import SyntaxTree

DISABLED = {"enabled": False}

OptionsCheck = Callable[[str, Mapping[str, Any]], None]


@dataclass(frozen=True)
class InlineOverride:
    """Configuration a directive comment applies to one detector at one location."""

    smell_type: str
    location: SourceLocation
    options: Mapping[str, Any] = field(default_factory=dict)


class OverrideIndex:
    """Overrides for a single run, keyed by location and then smell type."""

    def __init__(self, overrides: Iterable[InlineOverride] = ()) -> None:
        self._overrides: List[InlineOverride] = []
        self._by_location: Dict[SourceLocation, Dict[str, Dict[str, Any]]] = {}
        for override in overrides:
            self.add(override)

    def add(self, override: InlineOverride) -> None:
        self._overrides.append(override)
        per_location = self._by_location.setdefault(override.location, {})
        options = copy.deepcopy(dict(override.options))
        per_location.setdefault(override.smell_type, {}).update(options)

    def for_location(self, location: SourceLocation) -> Dict[str, Dict[str, Any]]:
        return copy.deepcopy(self._by_location.get(location, {}))

    def __iter__(self) -> Iterator[InlineOverride]:
        return iter(self._overrides)

    def __len__(self) -> int:
        return len(self._overrides)


class InlineOverrideResolver:
    """Validates and parses the directives found in a syntax tree's comment index."""

    def __init__(
        self,
        option_keys: Mapping[str, FrozenSet[str]],
        check_options: Optional[OptionsCheck] = None,
    ) -> None:
        self._option_keys = option_keys
        self._check_options = check_options
        self.logger = get_logger("overrides")

    @property
    def eligible_smell_types(self) -> FrozenSet[str]:
        return frozenset(self._option_keys)

    def resolve(self, tree: SyntaxTree) -> OverrideIndex:
        index = OverrideIndex()
        for location in sorted(tree.comment_index):
            comment = CodeComment(tree.comment_index[location])
            for directive in comment.directives():
                index.add(self._override_for(directive, comment, location, tree.origin))
        if len(index):
            self.logger.debug(
                "Resolved %d inline override(s) in %s", len(index), tree.origin
            )
        return index

    def _override_for(
        self,
        directive: Directive,
        comment: CodeComment,
        location: SourceLocation,
        origin: str,
    ) -> InlineOverride:
        name = directive.detector_name
        if name not in self._option_keys:
            raise BadDetectorInCommentError(
                origin=origin,
                detector_name=name,
                line=location.line,
                original_comment=comment.text,
            )
        options = self._parse_options(directive, comment, location, origin)
        unknown = set(options) - self._option_keys[name]
        if unknown:
            raise BadDetectorConfigurationKeyInCommentError(
                origin=origin,
                detector_name=name,
                line=location.line,
                original_comment=comment.text,
                offending_keys=unknown,
            )
        if self._check_options is not None:
            try:
                self._check_options(name, options)
            except ConfigurationError as exc:
                raise BadDetectorConfigurationValueInCommentError(
                    origin=origin,
                    detector_name=name,
                    line=location.line,
                    original_comment=comment.text,
                    problem=str(exc),
                ) from exc
        return InlineOverride(smell_type=name, location=location, options=options)

    @staticmethod
    def _parse_options(
        directive: Directive,
        comment: CodeComment,
        location: SourceLocation,
        origin: str,
    ) -> Dict[str, Any]:
        if directive.raw_options is None:
            return dict(DISABLED)

        def garbage(message: str) -> GarbageDetectorConfigurationInCommentError:
            return GarbageDetectorConfigurationInCommentError(
                origin=origin,
                detector_name=directive.detector_name,
                line=location.line,
                original_comment=comment.text,
                parse_message=message,
            )

        try:
            loaded = yaml.safe_load(directive.raw_options)
        except yaml.YAMLError as exc:
            raise garbage(str(exc)) from exc
        if not isinstance(loaded, dict):
            raise garbage(f"expected a mapping, got {type(loaded).__name__}")
        return {str(key): value for key, value in loaded.items()}


__all__ = ["InlineOverride", "InlineOverrideResolver", "OverrideIndex"]
