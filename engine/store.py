"""Per-session input state for the calculator"""
from dataclasses import asdict, fields as dataclass_fields

from loguru import logger

from .models import StoreKind, INPUT_TYPES, field_names
from .parsing import is_acceptable
from .compute import compute


class UnknownFieldError(KeyError):
    """Raised for a store kind or field name the calculator does not define"""


class CalculatorSession:
    """
    Holds the new-store and existing-store inputs for one user session.

    Field values stay as the text the user typed ("12." while typing) and
    are only parsed when metrics are computed. Text that is not empty and
    not a non-negative number is ignored, leaving the previous value.
    """

    def __init__(self):
        self._records = {kind: INPUT_TYPES[kind]() for kind in StoreKind}
        logger.debug("Calculator session created")

    def _record(self, kind):
        try:
            return self._records[StoreKind(kind)]
        except ValueError:
            raise UnknownFieldError(f"Unknown store kind: {kind!r}") from None

    def update_field(self, kind, field: str, raw_text: str):
        record = self._record(kind)
        if field not in field_names(kind):
            raise UnknownFieldError(f"{StoreKind(kind).value} has no field {field!r}")
        if not is_acceptable(raw_text):
            return
        setattr(record, field, raw_text)
        logger.debug("{}.{} = {!r}", StoreKind(kind).value, field, raw_text)

    def inputs(self, kind):
        """Live input record for a store kind"""
        return self._record(kind)

    def fields(self, kind):
        """Current field text for a store kind"""
        return asdict(self._record(kind))

    def reset(self, kind=None):
        """Clear one store's inputs, or both when kind is None"""
        kinds = list(StoreKind) if kind is None else [kind]
        for k in kinds:
            record = self._record(k)
            for f in dataclass_fields(record):
                setattr(record, f.name, "")
            logger.debug("{} inputs cleared", StoreKind(k).value)

    def metrics(self):
        """Derived metrics for both stores, computed from the current inputs"""
        return compute(self._records[StoreKind.NEW], self._records[StoreKind.EXISTING])
