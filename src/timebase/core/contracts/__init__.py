"""
Contract Validation Module

Модуль для валидации JSON контрактов timebase (Rational, PacketTiming).
"""

from .validators import (
    ContractValidator,
    PacketTimingValidator,
    RationalValidator,
    SchemaLoader,
    validate_packet_timing,
    validate_rational,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "RationalValidator",
    "PacketTimingValidator",
    # Functions
    "validate_rational",
    "validate_packet_timing",
]
