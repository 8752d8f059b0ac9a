"""Slot availability derivation and the booking resolver."""

from .resolver import (
    AvailabilityResult,
    AvailabilityState,
    InvalidDurationError,
    PastDateError,
    SlotAvailabilityError,
    SlotAvailabilityResolver,
    SlotTakenError,
    SlotUnavailableError,
    SubmissionInProgressError,
)
from .slots import OperatingWindow, SlotCandidate, derive_slots, overlaps

__all__ = [
    'AvailabilityResult',
    'AvailabilityState',
    'InvalidDurationError',
    'OperatingWindow',
    'PastDateError',
    'SlotAvailabilityError',
    'SlotAvailabilityResolver',
    'SlotCandidate',
    'SlotTakenError',
    'SlotUnavailableError',
    'SubmissionInProgressError',
    'derive_slots',
    'overlaps',
]
