"""Dutch postcode and house number normalisation."""
import re
from typing import Union

from nladdress.errors import InvalidFormat
from nladdress.models.address import POSTCODE_PATTERN, Postcode

# Checked before upper-casing; ASCII mode stops non-ASCII letters case-folding into A-Z
_POSTCODE_RE = re.compile(POSTCODE_PATTERN, re.IGNORECASE | re.ASCII)


def _compact(raw: str) -> str:
    return "".join(raw.split())


def is_valid(raw: object) -> bool:
    """Return True if *raw* is a Dutch postcode, ignoring spacing and case."""
    return isinstance(raw, str) and bool(_POSTCODE_RE.fullmatch(_compact(raw)))


def normalize(raw: object) -> Postcode:
    """
    Normalise to the canonical six character form, e.g. '9711 ac' -> '9711AC'.

    Raises InvalidFormat if the input is not a Dutch postcode.
    """
    if not is_valid(raw):
        raise InvalidFormat("postcode", raw)
    return Postcode(value=_compact(raw).upper())


def normalize_house_number(raw: Union[str, int, None]) -> str:
    """
    House numbers are opaque: '10', '10A' and '10-2' are all fine.
    Only an empty value is rejected.
    """
    if raw is None or isinstance(raw, bool):
        raise InvalidFormat("house_number", raw)
    text = str(raw).strip()
    if not text:
        raise InvalidFormat("house_number", raw)
    return text
