"""Base classes for smell detectors and their configuration."""

from __future__ import annotations

import copy
import re
from abc import ABC, abstractmethod
from typing import (
    Any,
    ClassVar,
    Dict,
    FrozenSet,
    Iterable,
    List,
    Mapping,
    Optional,
    Sequence,
    Tuple,
)

from ..context import CodeContext
from ..errors import ConfigurationError
from ..models import SmellWarning


class SmellConfiguration:
    """Option values owned by one detector instance, layered over its defaults.

    Every value must have the shape of its default: ``true``/``false`` for
    flags, integers for thresholds and lists of strings for name lists. Entries
    of ``pattern_keys`` are regular expressions; other lists may hold
    ``/regex/`` entries. Both kinds are compiled when merged.
    """

    def __init__(
        self,
        smell_type: str,
        defaults: Mapping[str, Any],
        options: Optional[Mapping[str, Any]] = None,
        pattern_keys: Iterable[str] = (),
    ) -> None:
        self.smell_type = smell_type
        self._defaults = copy.deepcopy(dict(defaults))
        self._pattern_keys = frozenset(pattern_keys)
        self._options: Dict[str, Any] = {}
        if options:
            self.merge(options)

    @property
    def known_keys(self) -> FrozenSet[str]:
        return frozenset(self._defaults)

    def merge(self, options: Mapping[str, Any]) -> None:
        if not isinstance(options, Mapping):
            raise ConfigurationError(
                f"Configuration for smell detector '{self.smell_type}' must be a "
                f"mapping, got {type(options).__name__}"
            )
        unknown = set(options) - set(self._defaults)
        if unknown:
            keys = ", ".join(repr(key) for key in sorted(map(str, unknown)))
            raise ConfigurationError(
                f"Unknown option(s) {keys} for smell detector '{self.smell_type}'"
            )
        for key, value in options.items():
            default = self._defaults[key]
            problem = _value_problem(value, default, key in self._pattern_keys)
            if problem is not None:
                raise ConfigurationError(
                    f"Invalid value {value!r} for option '{key}' of smell detector "
                    f"'{self.smell_type}': {problem}"
                )
        self._options.update(copy.deepcopy(dict(options)))

    def value(self, key: str) -> Any:
        if key in self._options:
            return self._options[key]
        if key in self._defaults:
            return self._defaults[key]
        raise ConfigurationError(
            f"Unknown option '{key}' for smell detector '{self.smell_type}'"
        )

    def as_dict(self) -> Dict[str, Any]:
        merged = copy.deepcopy(self._defaults)
        merged.update(copy.deepcopy(self._options))
        return merged


class SmellDetector(ABC):
    """Contract for detectors that report smells found in code contexts.

    Each instance owns its configuration. ``copy`` hands out an independent
    instance, so a prototype can be reconfigured per run without the change
    leaking anywhere else.
    """

    ENABLED_KEY = "enabled"
    EXCLUDE_KEY = "exclude"

    DEFAULT_OPTIONS: ClassVar[Mapping[str, Any]] = {}
    # Options whose entries are plain regular expressions.
    PATTERN_KEYS: ClassVar[FrozenSet[str]] = frozenset()
    contexts: ClassVar[Tuple[str, ...]] = ("method",)

    def __init__(self, configuration: Optional[Mapping[str, Any]] = None) -> None:
        self._config = SmellConfiguration(
            self.smell_type(), self.default_config(), configuration, self.PATTERN_KEYS
        )

    @classmethod
    def smell_type(cls) -> str:
        return cls.__name__

    @classmethod
    def default_config(cls) -> Dict[str, Any]:
        config: Dict[str, Any] = {cls.ENABLED_KEY: True, cls.EXCLUDE_KEY: []}
        config.update(copy.deepcopy(dict(cls.DEFAULT_OPTIONS)))
        return config

    @classmethod
    def option_keys(cls) -> FrozenSet[str]:
        return frozenset(cls.default_config())

    @classmethod
    def check_options(cls, options: Mapping[str, Any]) -> None:
        """Raise ConfigurationError unless ``options`` would configure this detector."""
        SmellConfiguration(
            cls.smell_type(), cls.default_config(), options, cls.PATTERN_KEYS
        )

    def configure_with(self, options: Mapping[str, Any]) -> None:
        self._config.merge(options)

    def copy(self) -> "SmellDetector":
        duplicate = copy.copy(self)
        duplicate._config = copy.deepcopy(self._config)
        return duplicate

    @property
    def config(self) -> Dict[str, Any]:
        return self._config.as_dict()

    @property
    def enabled(self) -> bool:
        return bool(self._config.value(self.ENABLED_KEY))

    def value(self, key: str, context: Optional[CodeContext] = None) -> Any:
        """Effective option value: inline override, this instance, then the default."""
        if key not in self._config.known_keys:
            raise ConfigurationError(
                f"Unknown option '{key}' for smell detector '{self.smell_type()}'"
            )
        if context is not None:
            overrides = context.config_for(self.smell_type())
            if key in overrides:
                return overrides[key]
        return self._config.value(key)

    def enabled_for(self, context: CodeContext) -> bool:
        if not self.value(self.ENABLED_KEY, context):
            return False
        return not matches_any(self.value(self.EXCLUDE_KEY, context), context.full_name)

    def run_for(self, context: CodeContext) -> List[SmellWarning]:
        if context.kind not in self.contexts or not self.enabled_for(context):
            return []
        return self.detect(context)

    @abstractmethod
    def detect(self, context: CodeContext) -> List[SmellWarning]:
        """Return the smells found in ``context``, in detection order."""

    def smell_warning(
        self, context: CodeContext, message: str, lines: Iterable[int] = ()
    ) -> SmellWarning:
        return SmellWarning(
            smell_type=self.smell_type(),
            message=message,
            context=context.full_name,
            lines=tuple(lines) or (context.line,),
            source=context.origin,
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._config.as_dict()!r})"


def _value_problem(value: Any, default: Any, plain_patterns: bool) -> Optional[str]:
    """Describe why ``value`` cannot replace ``default``, or return None."""
    if isinstance(default, bool):
        return None if isinstance(value, bool) else "expected true or false"
    if isinstance(default, int):
        if isinstance(value, bool) or not isinstance(value, int):
            return "expected an integer"
        return None
    if isinstance(default, list):
        if not isinstance(value, list):
            return "expected a list of strings"
        if not all(isinstance(item, str) for item in value):
            return "expected a list of strings"
        for item in value:
            pattern = item if plain_patterns else _slashed_pattern(item)
            if pattern is None:
                continue
            try:
                re.compile(pattern)
            except re.error as exc:
                return f"invalid regular expression {item!r} ({exc})"
    return None


def _slashed_pattern(entry: str) -> Optional[str]:
    if len(entry) > 1 and entry.startswith("/") and entry.endswith("/"):
        return entry[1:-1]
    return None


def matches_any(patterns: Sequence[str], value: str) -> bool:
    """Match ``value`` against exact names or ``/regex/`` entries."""
    for entry in patterns or ():
        pattern = _slashed_pattern(str(entry))
        if pattern is not None:
            if re.search(pattern, value):
                return True
        elif entry == value:
            return True
    return False


__all__ = ["SmellConfiguration", "SmellDetector", "matches_any"]
