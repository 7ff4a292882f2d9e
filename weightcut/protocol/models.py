# -*- coding: utf-8 -*-
"""Protocol and phase enumerations."""

from __future__ import annotations

from enum import Enum
from typing import Any

from ..errors import UnknownProtocolError


class Protocol(str, Enum):
    """Athlete protocol. Values match the stored protocol tags."""
    EXTREME_CUT = "1"
    RAPID_CUT = "2"
    OPTIMAL_CUT = "3"
    GAIN = "4"
    SPAR_GENERAL = "5"
    SPAR_COMPETITION = "6"

    @property
    def is_spar(self) -> bool:
        return self in (Protocol.SPAR_GENERAL, Protocol.SPAR_COMPETITION)

    @property
    def is_weight_cut(self) -> bool:
        return not self.is_spar

    @property
    def label(self) -> str:
        return PROTOCOL_LABELS[self]

    @classmethod
    def parse(cls, value: Any) -> "Protocol":
        if isinstance(value, Protocol):
            return value
        try:
            return cls(str(value))
        except ValueError:
            pass
        for member in cls:
            if str(value).strip().upper() == member.name:
                return member
        raise UnknownProtocolError(f"Unknown protocol: {value!r}")


PROTOCOL_LABELS = {
    Protocol.EXTREME_CUT: "Extreme Cut Phase",
    Protocol.RAPID_CUT: "Rapid Cut Phase",
    Protocol.OPTIMAL_CUT: "Optimal Cut Phase",
    Protocol.GAIN: "Gain Phase",
    Protocol.SPAR_GENERAL: "SPAR Nutrition",
    Protocol.SPAR_COMPETITION: "SPAR Competition",
}


class Phase(str, Enum):
    """Stage of the cut timeline."""
    TRAIN = "train"
    LOAD = "load"
    CUT = "cut"
    COMPETE = "compete"
    RECOVER = "recover"
    # SPAR protocols before the weigh-in
    TRACKING = "tracking"

