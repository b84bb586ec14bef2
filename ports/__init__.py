from .clock import ClockPort
from .person import PersonRecordPort

__all__ = [
    "ClockPort",
    "PersonRecordPort",
]
