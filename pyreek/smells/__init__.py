"""Smell detector implementations and the catalog of known detectors."""

from __future__ import annotations

from typing import Tuple, Type

from .base import SmellConfiguration, SmellDetector, matches_any
from .boolean_parameter import BooleanParameter
from .duplicate_method_call import DuplicateMethodCall
from .irresponsible_module import IrresponsibleModule
from .size import (
    LongParameterList,
    TooManyInstanceVariables,
    TooManyMethods,
    TooManyStatements,
)
from .uncommunicative import (
    UncommunicativeMethodName,
    UncommunicativeModuleName,
    UncommunicativeParameterName,
    UncommunicativeVariableName,
)

BUILTIN_DETECTORS: Tuple[Type[SmellDetector], ...] = tuple(
    sorted(
        (
            BooleanParameter,
            DuplicateMethodCall,
            IrresponsibleModule,
            LongParameterList,
            TooManyInstanceVariables,
            TooManyMethods,
            TooManyStatements,
            UncommunicativeMethodName,
            UncommunicativeModuleName,
            UncommunicativeParameterName,
            UncommunicativeVariableName,
        ),
        key=lambda detector: detector.smell_type(),
    )
)

__all__ = [
    "BUILTIN_DETECTORS",
    "BooleanParameter",
    "DuplicateMethodCall",
    "IrresponsibleModule",
    "LongParameterList",
    "SmellConfiguration",
    "SmellDetector",
    "TooManyInstanceVariables",
    "TooManyMethods",
    "TooManyStatements",
    "UncommunicativeMethodName",
    "UncommunicativeModuleName",
    "UncommunicativeParameterName",
    "UncommunicativeVariableName",
    "matches_any",
]
