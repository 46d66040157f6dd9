import math
import re

_ID_RE = re.compile(r"^x\^(\d+)$")


def term_id(exponent: int) -> str:
    return f"x^{exponent}"


def exponent_from_id(field_id: str) -> int:
    # ids look like "x^3", the same names the factor endpoint takes as query parameters
    m = _ID_RE.match(field_id or "")
    if not m:
        raise ValueError(f"Invalid term id '{field_id}'")
    return int(m.group(1))


def parse_coefficient(text):
    # empty entry means a zero coefficient
    if text is None:
        return 0.0
    s = str(text).strip()
    if s == "":
        return 0.0
    try:
        value = float(s)
    except ValueError:
        raise ValueError(f"Invalid coefficient '{s}'")
    if not math.isfinite(value):
        raise ValueError(f"Invalid coefficient '{s}'")
    return value


def to_mapping(sequence):
    """Exponent -> coefficient mapping for a sequence indexed by exponent."""
    return {exponent: value for exponent, value in enumerate(sequence)}


def highest_first(sequence):
    # sequence is indexed by exponent; returns highest->lowest
    return list(reversed(sequence))


def factor_query(sequence):
    """Query parameters for the factor endpoint.

    The endpoint takes ``degree`` plus one ``x^<n>`` parameter per exponent.
    """
    if not sequence:
        raise ValueError("Empty coefficient sequence")
    params = {"degree": str(len(sequence) - 1)}
    for exponent, value in enumerate(sequence):
        params[term_id(exponent)] = f"{value:g}"
    return params
