# Namespace for pipeline steps
from .parse_records import ParseRecords  # noqa: F401
from .persist_records import PersistRecords  # noqa: F401
