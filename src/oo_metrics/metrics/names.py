"""Canonical metric identifiers.

Declaration order is the order reports list metrics in.
"""

from enum import Enum


class MetricName(Enum):
    # Size
    RTLOC = "RTLOC"

    # Methods
    Mit = "Mit"
    Mi = "Mi"
    Md = "Md"
    Mo = "Mo"
    Ma = "Ma"
    PMi = "PMi"
    PMd = "PMd"
    HMi = "HMi"
    HMd = "HMd"
    NMIR = "NMIR"
    MIF = "MIF"
    PMR = "PMR"
    MHF = "MHF"

    # Attributes
    Ait = "Ait"
    Ai = "Ai"
    Ad = "Ad"
    Ao = "Ao"
    Aa = "Aa"
    Av = "Av"
    AIF = "AIF"
    AHF = "AHF"

    @property
    def position(self) -> int:
        """Index of this name in report order."""
        return _ORDER[self]

    def __str__(self) -> str:
        return self.value


_ORDER = {name: index for index, name in enumerate(MetricName)}
