import pandas as pd

from coefficients import highest_first


def format_number(x, precision=2):
    # 3.1415 -> "3.14", -3.0 -> "-3"
    r = round(float(x), precision)
    if r == int(r):
        return str(int(r))
    return repr(r)


def _term_name(p):
    if p == 0:
        return "1"
    return "x" if p == 1 else f"x^{p}"


def sequence_to_frame(sequence):
    # sequence is indexed by exponent; show it highest->lowest like the form
    terms = [_term_name(p) for p in range(len(sequence) - 1, -1, -1)]
    return pd.DataFrame({"term": terms, "coefficient": highest_first(sequence)})
