"""
Core math modules для timebase

Точная рациональная арифметика и рескейлинг без float и без переполнения.
"""

# Integer Safeguards
from timebase.core.math.integer_safeguards import (
    # Bounds & sentinels
    INT64_MAX,
    INT64_MIN,
    NOPTS_VALUE,
    # Validation
    is_int64,
    is_sentinel,
    is_strict_int,
    validate_int,
    validate_int64,
    # Integer ops
    sign,
    three_way_compare,
    trunc_divmod,
)

# Rational
from timebase.core.math.rational import (
    Rational,
    RationalDivisionByZero,
    as_rational,
)

# Rational Arithmetic
from timebase.core.math.arithmetic import (
    add_rationals,
    compare_rationals,
    divide_rationals,
    invert_rational,
    multiply_rationals,
    reduce_rational,
    subtract_rationals,
)

# Rescale Engine
from timebase.core.math.rescale import (
    TIME_BASE,
    TIME_BASE_Q,
    Rounding,
    compare_timestamps,
    rescale,
    rescale_rnd,
    rescale_timestamp,
    round_quotient,
    split_rounding,
)

__all__ = [
    # Integer Safeguards — Bounds & sentinels
    "INT64_MAX",
    "INT64_MIN",
    "NOPTS_VALUE",
    # Integer Safeguards — Validation
    "is_int64",
    "is_sentinel",
    "is_strict_int",
    "validate_int",
    "validate_int64",
    # Integer Safeguards — Integer ops
    "sign",
    "three_way_compare",
    "trunc_divmod",
    # Rational — Types
    "Rational",
    "RationalDivisionByZero",
    "as_rational",
    # Rational Arithmetic
    "add_rationals",
    "compare_rationals",
    "divide_rationals",
    "invert_rational",
    "multiply_rationals",
    "reduce_rational",
    "subtract_rationals",
    # Rescale Engine — Constants
    "TIME_BASE",
    "TIME_BASE_Q",
    # Rescale Engine — Types
    "Rounding",
    # Rescale Engine — Functions
    "compare_timestamps",
    "rescale",
    "rescale_rnd",
    "rescale_timestamp",
    "round_quotient",
    "split_rounding",
]
