from typing import List, Tuple

from .unit_conversion import Record


# Heights (cm) of ten people; the fixed population for the sampling demo.
HEIGHTS_CM: Tuple[int, ...] = (175, 182, 150, 187, 165, 177, 200, 198, 157, 165)

_NAMES: Tuple[str, ...] = (
    "Ana", "Ben", "Cleo", "Dev", "Eli", "Fay", "Gus", "Hana", "Ivo", "Jun",
)


def height_records() -> List[Record]:
    """
    Fresh (name, height_cm) record table built from HEIGHTS_CM.
    """
    return [Record(identifier=name, value=float(h)) for name, h in zip(_NAMES, HEIGHTS_CM)]
