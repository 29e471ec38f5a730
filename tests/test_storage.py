import pytest

from schemas import RunStatus
from storage import DashboardStore


def test_defaults(store):
    assert store.get_run_status() is RunStatus.COMPLETED
    assert store.get_research_notes() == ""


def test_notes_round_trip(store):
    store.set_research_notes("hello")
    assert store.get_research_notes() == "hello"

    store.set_research_notes("hello")
    assert store.get_research_notes() == "hello"


def test_notes_are_replaced_not_appended(store):
    store.set_research_notes("first")
    store.set_research_notes("second")
    assert store.get_research_notes() == "second"


def test_set_run_status_accepts_enum_and_string(store):
    store.set_run_status(RunStatus.ERROR)
    assert store.get_run_status() is RunStatus.ERROR
    store.set_run_status("idle")
    assert store.get_run_status() is RunStatus.IDLE


def test_set_run_status_rejects_unknown(store):
    with pytest.raises(ValueError):
        store.set_run_status("paused")
    assert store.get_run_status() is RunStatus.COMPLETED


def test_returned_data_cannot_corrupt_store(store):
    data = store.get_molecular_data()
    data.atoms[0].symbol = "X"
    data.atoms.clear()
    data.basis_sets.append("def2-SVP")

    fresh = store.get_molecular_data()
    assert fresh.atoms[0].symbol == "N"
    assert len(fresh.atoms) == 4
    assert "def2-SVP" not in fresh.basis_sets


def test_molecular_data(store):
    data = store.get_molecular_data()
    atom_ids = {a.id for a in data.atoms}

    assert data.molecule == "NH3"
    assert data.electron_count == 10
    assert data.iteration_count == len(data.eigenvalue_history) == 10
    assert data.eigenvalue_history[-1].energy == data.ground_state_energy
    assert all(b.atom1 in atom_ids and b.atom2 in atom_ids for b in data.bonds)


def test_quantum_resources(store):
    data = store.get_quantum_resources()
    assert data.selected_backend in {b.id for b in data.backends}
    assert [r.status for r in data.run_history].count("failed") == 1


def test_fertilizer_metrics(store):
    data = store.get_fertilizer_metrics()
    assert len(data.comparison_table) == 6
    assert data.iteration_trend[-1].efficiency == data.reaction_efficiency_index


def test_vqe_execution_reflects_status(store):
    assert store.get_vqe_execution().status is RunStatus.COMPLETED
    store.set_run_status("running")

    data = store.get_vqe_execution()
    assert data.status is RunStatus.RUNNING
    assert (data.min_layers, data.max_layers) == (1, 10)
    assert (data.min_step_size, data.max_step_size) == (0.001, 0.1)
    assert data.convergence_log[-1].message == "Converged!"
    assert data.circuit_structure == []


def test_decision_support_reflects_notes(store):
    store.set_research_notes("check basis set")
    data = store.get_decision_support()

    assert data.research_notes == "check basis set"
    assert [r.priority for r in data.recommendations] == ["high", "high", "medium", "medium", "low"]
    assert sum(e.total_cost for e in data.cost_proxy_table) == pytest.approx(16.23)


def test_instances_are_independent():
    a, b = DashboardStore(), DashboardStore()
    a.set_research_notes("a only")
    a.set_run_status("idle")

    assert b.get_research_notes() == ""
    assert b.get_run_status() is RunStatus.COMPLETED
