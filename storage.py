"""In-memory store for the dashboard: fixed datasets plus run status and notes."""

from __future__ import annotations

import copy
import logging
import threading
from typing import Union

import reference_data
from schemas import (
    DecisionSupportData,
    FertilizerMetricsData,
    MolecularData,
    QuantumResourceData,
    RunStatus,
    VQEExecutionData,
)

logger = logging.getLogger(__name__)


class DashboardStore:
    """Thread-safe holder for the process-wide dashboard state.

    Reference payloads are rebuilt from a deep copy of the fixtures on every
    read, so nothing a caller does to a returned model leaks back in.
    """

    def __init__(self, initial_status: Union[RunStatus, str] = RunStatus.COMPLETED, notes: str = "") -> None:
        self._lock = threading.Lock()
        self._status = RunStatus(initial_status)
        self._notes = notes

    # -----------------------
    # reference datasets
    # -----------------------
    def get_molecular_data(self) -> MolecularData:
        return MolecularData.model_validate(copy.deepcopy(reference_data.MOLECULAR))

    def get_quantum_resources(self) -> QuantumResourceData:
        return QuantumResourceData.model_validate(copy.deepcopy(reference_data.QUANTUM_RESOURCES))

    def get_fertilizer_metrics(self) -> FertilizerMetricsData:
        return FertilizerMetricsData.model_validate(copy.deepcopy(reference_data.FERTILIZER_METRICS))

    def get_vqe_execution(self) -> VQEExecutionData:
        payload = copy.deepcopy(reference_data.VQE_EXECUTION)
        payload["status"] = self.get_run_status()
        return VQEExecutionData.model_validate(payload)

    def get_decision_support(self) -> DecisionSupportData:
        payload = copy.deepcopy(reference_data.DECISION_SUPPORT)
        payload["researchNotes"] = self.get_research_notes()
        return DecisionSupportData.model_validate(payload)

    # -----------------------
    # mutable state
    # -----------------------
    def get_run_status(self) -> RunStatus:
        with self._lock:
            return self._status

    def set_run_status(self, status: Union[RunStatus, str]) -> None:
        status = RunStatus(status)
        with self._lock:
            self._status = status

    def get_research_notes(self) -> str:
        with self._lock:
            return self._notes

    def set_research_notes(self, text: str) -> None:
        # length is checked by ResearchNotesUpdate at the API boundary
        with self._lock:
            self._notes = text
        logger.info("Research notes updated (%d chars)", len(text))
