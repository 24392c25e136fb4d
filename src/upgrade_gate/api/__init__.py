"""API layer for upgrade-gate business logic."""

from .admission import AdmissionDecision, AdmissionHook, AdmissionService
from .validator import TransitionValidator

__all__ = ["AdmissionDecision", "AdmissionHook", "AdmissionService", "TransitionValidator"]
