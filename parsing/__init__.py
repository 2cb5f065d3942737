from .dialect import Dialect, detect_dialect, split_lines
from .field_classifier import FieldClassifier, FieldKind
from .row_splitter import split_row

__all__ = [
    "Dialect",
    "detect_dialect",
    "split_lines",
    "FieldClassifier",
    "FieldKind",
    "split_row",
]
