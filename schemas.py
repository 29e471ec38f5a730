"""
Dashboard data model.

Pydantic models for every payload the dashboard consumes, plus the two
request bodies the API accepts. Payload models serialize with camelCase
keys, which is what the frontend reads.
"""

from __future__ import annotations

from enum import Enum
from typing import List, Literal, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

MIN_LAYERS = 1
MAX_LAYERS = 10
MIN_STEP_SIZE = 0.001
MAX_STEP_SIZE = 0.1
MAX_NOTES_LENGTH = 5000


class RunStatus(str, Enum):
    """Lifecycle state of the simulated VQE execution."""
    IDLE = "idle"
    RUNNING = "running"
    COMPLETED = "completed"
    ERROR = "error"


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# -----------------------
# requests
# -----------------------
class RunConfig(BaseModel):
    """Algorithm settings sent with a run request. Only echoed back."""
    model_config = ConfigDict(populate_by_name=True)

    ansatz_id: str = Field(
        validation_alias=AliasChoices("ansatz", "ansatzId", "ansatz_id"),
        serialization_alias="ansatz",
    )
    optimizer_id: str = Field(
        validation_alias=AliasChoices("optimizer", "optimizerId", "optimizer_id"),
        serialization_alias="optimizer",
    )
    layer_count: int = Field(
        ge=MIN_LAYERS,
        le=MAX_LAYERS,
        strict=True,
        validation_alias=AliasChoices("layers", "layerCount", "layer_count"),
        serialization_alias="layers",
    )
    step_size: float = Field(
        ge=MIN_STEP_SIZE,
        le=MAX_STEP_SIZE,
        strict=True,
        validation_alias=AliasChoices("stepSize", "step_size"),
        serialization_alias="stepSize",
    )


class ResearchNotesUpdate(BaseModel):
    notes: str = Field(max_length=MAX_NOTES_LENGTH)


class RunAcknowledgement(BaseModel):
    message: str
    config: Optional[RunConfig] = None


# -----------------------
# molecular simulation
# -----------------------
class Atom(CamelModel):
    id: int
    element: str
    symbol: str
    x: float
    y: float
    z: float
    charge: float


class Bond(CamelModel):
    id: int
    atom1: int
    atom2: int
    type: Literal["single", "double", "triple"]
    length: float


class HamiltonianTerm(CamelModel):
    id: int
    type: str
    coefficient: float
    operator: str


class EigenvaluePoint(CamelModel):
    iteration: int
    energy: float


class MolecularData(CamelModel):
    molecule: str
    formula: str
    atoms: List[Atom]
    bonds: List[Bond]
    hamiltonian_terms: List[HamiltonianTerm]
    basis_sets: List[str]
    selected_basis_set: str
    electron_count: int
    ground_state_energy: float
    eigenvalue_history: List[EigenvaluePoint]
    iteration_count: int


# -----------------------
# quantum resources
# -----------------------
class QuantumBackend(CamelModel):
    id: str
    name: str
    provider: str
    status: Literal["online", "offline", "busy"]


class RunHistoryEntry(CamelModel):
    id: int
    timestamp: str
    backend: str
    qubits: int
    depth: int
    shots: int
    execution_time: float
    status: Literal["completed", "failed", "running"]


class QuantumResourceData(CamelModel):
    backends: List[QuantumBackend]
    selected_backend: str
    logical_qubits: int
    circuit_depth: int
    shot_count: int
    error_estimate: float
    execution_time_per_run: float
    run_history: List[RunHistoryEntry]


# -----------------------
# fertilizer efficiency
# -----------------------
class ClassicalQuantumComparison(CamelModel):
    metric: str
    classical: float
    quantum: float
    unit: str
    improvement: float


class IterationTrendPoint(CamelModel):
    iteration: int
    energy: float
    efficiency: float


class FertilizerMetricsData(CamelModel):
    energy_per_mole: float
    nitrogen_fixation_score: float
    reaction_efficiency_index: float
    emission_proxy_score: float
    comparison_table: List[ClassicalQuantumComparison]
    iteration_trend: List[IterationTrendPoint]


# -----------------------
# VQE execution
# -----------------------
class AnsatzOption(CamelModel):
    id: str
    name: str
    description: str


class OptimizerOption(CamelModel):
    id: str
    name: str
    description: str


class ConvergenceLogEntry(CamelModel):
    timestamp: str
    iteration: int
    energy: float
    gradient: float
    message: str


class CircuitGate(CamelModel):
    type: str
    qubit: int
    control: Optional[int] = None
    parameter: Optional[float] = None


class VQEExecutionData(CamelModel):
    algorithm: str
    ansatz_options: List[AnsatzOption]
    selected_ansatz: str
    optimizer_options: List[OptimizerOption]
    selected_optimizer: str
    layers: int
    step_size: float
    min_layers: int = MIN_LAYERS
    max_layers: int = MAX_LAYERS
    min_step_size: float = MIN_STEP_SIZE
    max_step_size: float = MAX_STEP_SIZE
    status: RunStatus
    convergence_log: List[ConvergenceLogEntry]
    circuit_structure: List[List[CircuitGate]] = Field(default_factory=list)


# -----------------------
# decision support
# -----------------------
class ResourceSummary(CamelModel):
    label: str
    value: float
    unit: str
    change: Optional[float] = None


class CostProxyEntry(CamelModel):
    resource: str
    quantity: float
    unit_cost: float
    total_cost: float


class Recommendation(CamelModel):
    id: int
    priority: Literal["high", "medium", "low"]
    title: str
    description: str
    impact: str


class DecisionSupportData(CamelModel):
    energy_reduction_summary: ResourceSummary
    resource_usage_summary: List[ResourceSummary]
    cost_proxy_table: List[CostProxyEntry]
    recommendations: List[Recommendation]
    research_notes: str
