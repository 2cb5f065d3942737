from .llm import LLMClientPort
from .source import ExportSourcePort
from .store import RecordStorePort, StoreWriteError

__all__ = [
    "LLMClientPort",
    "ExportSourcePort",
    "RecordStorePort",
    "StoreWriteError",
]
