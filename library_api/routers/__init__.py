import re
from typing import Optional

from library_api.schemas import MAX_ID

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_id(raw: str) -> Optional[int]:
    """
    Convierte el id del path a entero, igual que parseInt(id, 10).

    Se toma el prefijo numérico ("12abc" -> 12, "1.5" -> 1). Si no hay
    prefijo, o el valor cae fuera de 1..MAX_ID, devuelve None y la búsqueda
    simplemente no encuentra nada (404).
    """
    match = _LEADING_INT.match(raw)
    if not match:
        return None
    value = int(match.group(1))
    if not 1 <= value <= MAX_ID:
        return None
    return value
