from dataclasses import dataclass
from typing import List, Sequence


CM_PER_INCH = 2.54


def convert(values: Sequence[float], factor: float, divide: bool = False) -> List[float]:
    """
    Apply a scalar conversion factor to every element of `values`.

    The output is allocated up front with the same length as the input and
    filled by index, so out[i] always corresponds to values[i]:

        out[i] = values[i] * factor        (default)
        out[i] = values[i] / factor        (divide=True)

    Pure: the input is never modified.
    """
    n = len(values)
    out = [0.0] * n

    for i in range(n):
        if divide:
            out[i] = values[i] / factor
        else:
            out[i] = values[i] * factor

    return out


def cm_to_inches(values: Sequence[float]) -> List[float]:
    return convert(values, CM_PER_INCH, divide=True)


def inches_to_cm(values: Sequence[float]) -> List[float]:
    return convert(values, CM_PER_INCH)


@dataclass
class Record:
    """
    One row of a record table: an identifier and a single numeric attribute.
    """
    identifier: str
    value: float


def convert_records(records: List[Record], factor: float, divide: bool = False) -> None:
    """
    Convert the `value` of every row in place, one row per loop iteration.
    """
    for i in range(len(records)):
        row = records[i]
        if divide:
            row.value = row.value / factor
        else:
            row.value = row.value * factor
