"""Builds the set of configured smell detectors used for one examination."""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Iterable, List, Mapping, Optional

from .context import CodeContext
from .errors import ConfigurationError
from .models import SmellWarning
from .overrides import InlineOverrideResolver
from .smells import BUILTIN_DETECTORS, SmellDetector

# Default instances, one per smell family. Never configured in place: every
# repository works on copies.
_PROTOTYPES: Mapping[str, SmellDetector] = MappingProxyType(
    {detector.smell_type(): detector() for detector in BUILTIN_DETECTORS}
)
_ELIGIBLE_SMELL_TYPES: FrozenSet[str] = frozenset(_PROTOTYPES)
_OPTION_KEYS: Mapping[str, FrozenSet[str]] = MappingProxyType(
    {detector.smell_type(): detector.option_keys() for detector in BUILTIN_DETECTORS}
)

DetectorConfiguration = Mapping[str, Mapping[str, Any]]


class DetectorRepository:
    """Configured detectors for a single run, in a fixed (alphabetical) order."""

    def __init__(
        self,
        smell_types: Optional[Iterable[str]] = None,
        configuration: Optional[DetectorConfiguration] = None,
    ) -> None:
        selected = self._select(smell_types)
        self._detectors: List[SmellDetector] = [
            _PROTOTYPES[name].copy() for name in selected
        ]
        self._configure(configuration or {})

    @classmethod
    def build(
        cls,
        configuration: Optional[DetectorConfiguration] = None,
        smell_types: Optional[Iterable[str]] = None,
    ) -> "DetectorRepository":
        return cls(smell_types=smell_types, configuration=configuration)

    @staticmethod
    def eligible_smell_types() -> FrozenSet[str]:
        return _ELIGIBLE_SMELL_TYPES

    @staticmethod
    def option_keys() -> Mapping[str, FrozenSet[str]]:
        """Known option keys per smell type, for validating inline directives."""
        return _OPTION_KEYS

    @staticmethod
    def check_options(smell_type: str, options: Mapping[str, Any]) -> None:
        """Raise ConfigurationError unless ``options`` suit that detector."""
        _PROTOTYPES[smell_type].check_options(options)

    @classmethod
    def override_resolver(cls) -> InlineOverrideResolver:
        return InlineOverrideResolver(cls.option_keys(), cls.check_options)

    @property
    def detectors(self) -> List[SmellDetector]:
        return list(self._detectors)

    def examine(self, context: CodeContext) -> List[SmellWarning]:
        warnings: List[SmellWarning] = []
        for fragment in context.iter_contexts():
            for detector in self._detectors:
                warnings.extend(detector.run_for(fragment))
        return warnings

    @staticmethod
    def _select(smell_types: Optional[Iterable[str]]) -> List[str]:
        if smell_types is None:
            return sorted(_PROTOTYPES)
        requested = set(smell_types)
        unknown = requested - _ELIGIBLE_SMELL_TYPES
        if unknown:
            names = ", ".join(sorted(unknown))
            raise ConfigurationError(f"Unknown smell detector(s) requested: {names}")
        return sorted(requested)

    def _configure(self, configuration: DetectorConfiguration) -> None:
        if not isinstance(configuration, Mapping):
            raise ConfigurationError(
                "Detector configuration must map detector names to options"
            )
        unknown = set(configuration) - _ELIGIBLE_SMELL_TYPES
        if unknown:
            names = ", ".join(repr(name) for name in sorted(map(str, unknown)))
            raise ConfigurationError(
                f"Unknown smell detector(s) in configuration: {names}"
            )
        by_name: Dict[str, SmellDetector] = {
            detector.smell_type(): detector for detector in self._detectors
        }
        for name, options in configuration.items():
            detector = by_name.get(name)
            if detector is None:
                # Validate options even for detectors filtered out of this run.
                detector = _PROTOTYPES[name].copy()
            detector.configure_with(options)


__all__ = ["DetectorConfiguration", "DetectorRepository"]
