"""Application ports - interfaces for external adapters."""

from slotsync.application.ports.clock import Clock
from slotsync.application.ports.doctor_source import DoctorSource

__all__ = [
    "Clock",
    "DoctorSource",
]
