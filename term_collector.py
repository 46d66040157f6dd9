import enum
import logging
import math

from coefficients import exponent_from_id, parse_coefficient, term_id, to_mapping
from term_field import TermField

logger = logging.getLogger(__name__)

DEFAULT_MIN_DEGREE = 3
DEFAULT_MAX_DEGREE = 100


class CoefficientError(ValueError):
    """A submitted entry could not be read as a number."""

    def __init__(self, exponent, text):
        self.exponent = exponent
        self.text = text
        super().__init__(f"ERROR: the value '{text}' entered for x^{exponent} is not a number")


class State(enum.Enum):
    IDLE = "idle"
    FIELDS_SHOWN = "fields_shown"


class TermCollector:
    """Owns the degree input, the generated term fields and the submission.

    ``on_submit`` receives the coefficients as a list indexed by exponent
    (index 0 is the constant term), or as a ``{exponent: value}`` dict when
    ``as_mapping`` is set. Its return value is ignored.
    """

    def __init__(self, on_submit=None, min_degree=DEFAULT_MIN_DEGREE, max_degree=DEFAULT_MAX_DEGREE,
                 as_mapping=False, key="terms"):
        self.on_submit = on_submit
        self.min_degree = min_degree
        self.max_degree = max_degree
        self.as_mapping = as_mapping
        self.key = key
        self.degree = None
        self.error = None
        self.fields = []
        self.generation = 0

    @property
    def state(self):
        return State.FIELDS_SHOWN if self.fields else State.IDLE

    @property
    def error_message(self):
        return (f"ERROR: the degree must be an integer greater than or equal to {self.min_degree}"
                f" and at most {self.max_degree}")

    @property
    def field_ids(self):
        return [f.id for f in self.fields]

    def parse_degree(self, degree):
        """The accepted degree as an int, or None when it is rejected."""
        if degree is None:
            logger.warning("degree is empty")
            return None
        try:
            d = float(degree)
        except (TypeError, ValueError):
            logger.warning("degree '%s' is not a number", degree)
            return None
        if math.isnan(d):
            logger.warning("degree is not a number")
            return None
        if math.isinf(d) or d != round(d):
            return None
        if not self.min_degree <= d <= self.max_degree:
            return None
        return int(d)

    def is_valid_degree(self, degree) -> bool:
        return self.parse_degree(degree) is not None

    def check_degree(self, degree) -> bool:
        """Validate ``degree`` and rebuild the field list; the "Go" action."""
        parsed = self.parse_degree(degree)
        if parsed is None:
            logger.warning("rejected degree %r", degree)
            self.error = self.error_message
            self.degree = None
            self.fields = []
            return False

        self.error = None
        self.degree = parsed
        self.generation += 1
        # descending: highest exponent is rendered first
        self.fields = [TermField(p, id=term_id(p)) for p in range(self.degree, -1, -1)]
        logger.debug("generated %d term fields for degree %d", len(self.fields), self.degree)
        return True

    def dismiss_error(self):
        self.error = None

    def widget_key(self, field):
        # generation in the key so regenerated fields start out blank
        return f"{self.key}-{self.generation}-{field.id}"

    def extract(self, values):
        """Resolve the entered text for every field into a list indexed by exponent."""
        sequence = [0.0] * (self.degree + 1)
        for field_id in self.field_ids:
            exponent = exponent_from_id(field_id)
            text = values.get(field_id)
            try:
                sequence[exponent] = parse_coefficient(text)
            except ValueError:
                logger.error("non-numeric value %r submitted for %s", text, field_id)
                raise CoefficientError(exponent, text)
        return sequence

    def submit(self, values):
        if self.state is not State.FIELDS_SHOWN:
            raise RuntimeError("no term fields to submit")
        sequence = self.extract(values)
        result = to_mapping(sequence) if self.as_mapping else sequence
        if self.on_submit is not None:
            self.on_submit(result)
        return result
