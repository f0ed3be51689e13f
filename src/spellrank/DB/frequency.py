from __future__ import annotations
import math
from array import array
from typing import Iterable, Optional

from ..config import NEUTRAL_FREQUENCY


class FrequencyTable:
    """
    Dense word-index -> relative frequency table (float32).
    Out-of-range, negative, unknown (None) and NaN entries read as the neutral value.
    """

    def __init__(self, values: Optional[array] = None) -> None:
        self._values: array = values if values is not None else array("f")

    @classmethod
    def from_values(cls, values: Iterable[float]) -> "FrequencyTable":
        return cls(array("f", (float(v) for v in values)))

    @classmethod
    def empty(cls) -> "FrequencyTable":
        return cls()

    def __len__(self) -> int:
        return len(self._values)

    def get(self, index: Optional[int]) -> float:
        if index is None or index < 0 or index >= len(self._values):
            return NEUTRAL_FREQUENCY
        v = self._values[index]
        return NEUTRAL_FREQUENCY if math.isnan(v) else float(v)

    def tolist(self) -> list[float]:
        return self._values.tolist()
