# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Statsd line protocol encoding.

One metric per line, newline-separated inside a datagram::

    <prefix><bucket>:<value>|<kind>[|@<sample_rate>]

The ``|@`` suffix is only emitted when the effective sample rate is not 1,
so the daemon can scale sampled counters back up.
"""

from __future__ import annotations

import math
import re
from decimal import Decimal
from enum import Enum

# Runs of anything outside [A-Za-z0-9_]; ASCII only so the result is
# always safe next to the ':' and '|' delimiters.
_NON_WORD_RUN = re.compile(r"\W+", re.ASCII)

# Integral floats below this magnitude are rendered without an exponent.
_INTEGRAL_LIMIT = 1e16


class MetricKind(Enum):
    """Metric type tag carried by every line.

    - COUNT: Counter delta, reset by the daemon on every flush interval.
    - GAUGE: Absolute value; the daemon keeps the last one received.
    - TIMING: Duration in milliseconds; percentiles are computed server-side.
    - SET: Unique value; the daemon counts distinct values per interval.
    """

    COUNT = "c"
    GAUGE = "g"
    TIMING = "ms"
    SET = "s"


def format_value(value: float) -> str:
    """
    Format a number using its shortest round-trippable representation.

    Integral values drop the fractional part, everything else keeps full
    precision.

    Example:
        >>> format_value(3.0)
        '3'
        >>> format_value(0.1)
        '0.1'
        >>> format_value(1e-05)
        '1e-05'
    """
    number = float(value)
    if number.is_integer() and abs(number) < _INTEGRAL_LIMIT:
        return str(int(number))
    return repr(number)


def format_decimal(value: float) -> str:
    """
    Format a number as a plain decimal string, never using an exponent.

    Example:
        >>> format_decimal(1e-05)
        '0.00001'
        >>> format_decimal(42.0)
        '42'
    """
    number = float(value)
    if not math.isfinite(number):
        return repr(number)
    if number.is_integer():
        return str(int(number))
    return format(Decimal(repr(number)), "f")


def sanitize_unique_value(value: str) -> str:
    """
    Collapse every run of non-word characters into a single underscore.

    Example:
        >>> sanitize_unique_value("foo bar!baz")
        'foo_bar_baz'
    """
    return _NON_WORD_RUN.sub("_", value)


def format_line(
    prefix: str,
    bucket: str,
    value: str,
    kind: MetricKind,
    sample_rate: float = 1.0,
) -> str:
    """
    Build one protocol line.

    The prefix and bucket are used verbatim; callers are responsible for
    the value already being formatted.
    """
    line = f"{prefix}{bucket}:{value}|{kind.value}"
    if sample_rate != 1:
        line += f"|@{format_value(sample_rate)}"
    return line


__all__ = [
    "MetricKind",
    "format_decimal",
    "format_line",
    "format_value",
    "sanitize_unique_value",
]
