"""Metric kinds a program may declare.

The kind taxonomy is owned by the metrics runtime; the AST only carries one of
these values on each declaration.
"""

from enum import Enum


class MetricKind(Enum):
    """Kind of an exported metric.

    The member value is the keyword used in program source.

    """

    COUNTER = "counter"
    GAUGE = "gauge"
    TIMER = "timer"
