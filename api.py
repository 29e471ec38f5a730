"""
Dashboard JSON API.

GET  /api/status                  service info + live run status
GET  /api/molecular               NH3 geometry, Hamiltonian terms, eigenvalue history
GET  /api/quantum-resources       backends + run history
GET  /api/fertilizer-metrics      classical vs quantum comparison
GET  /api/vqe-execution           algorithm options, convergence log, run status
POST /api/vqe-execution/run       start a run  {ansatz, optimizer, layers, stepSize}
POST /api/vqe-execution/stop      stop the current run
GET  /api/decision-support        cost table, recommendations, research notes
GET  /api/decision-support/notes  research notes only
POST /api/decision-support/notes  replace research notes  {notes}

Every response is {"success": true, "data": ...} or the error envelope from
``errors.py``.
"""

from __future__ import annotations

import logging

from flask import Blueprint, current_app, jsonify, request
from pydantic import BaseModel

from run_controller import RunController
from schemas import ResearchNotesUpdate
from storage import DashboardStore

logger = logging.getLogger(__name__)

SERVICE_NAME = "NH3 VQE Dashboard"
EXTENSION_KEY = "vqe_dashboard"

api = Blueprint("api", __name__, url_prefix="/api")


def _store() -> DashboardStore:
    return current_app.extensions[EXTENSION_KEY]["store"]


def _controller() -> RunController:
    return current_app.extensions[EXTENSION_KEY]["controller"]


def _ok(data):
    if isinstance(data, BaseModel):
        data = data.model_dump(mode="json", by_alias=True, exclude_none=True)
    return jsonify({"success": True, "data": data})


# -----------------------
# service info
# -----------------------
@api.get("/status")
def status():
    return _ok({
        "service": SERVICE_NAME,
        "version": current_app.config.get("VERSION"),
        "runStatus": _controller().status.value,
        "endpoints": sorted(
            rule.rule for rule in current_app.url_map.iter_rules()
            if rule.endpoint.startswith(api.name + ".")
        ),
    })


# -----------------------
# reference data
# -----------------------
@api.get("/molecular")
def molecular():
    return _ok(_store().get_molecular_data())


@api.get("/quantum-resources")
def quantum_resources():
    return _ok(_store().get_quantum_resources())


@api.get("/fertilizer-metrics")
def fertilizer_metrics():
    return _ok(_store().get_fertilizer_metrics())


@api.get("/decision-support")
def decision_support():
    return _ok(_store().get_decision_support())


# -----------------------
# run lifecycle
# -----------------------
@api.get("/vqe-execution")
def vqe_execution():
    return _ok(_store().get_vqe_execution())


@api.post("/vqe-execution/run")
def start_run():
    ack = _controller().start(request.get_json(silent=True))
    return _ok(ack)


@api.post("/vqe-execution/stop")
def stop_run():
    return _ok(_controller().stop())


# -----------------------
# research notes
# -----------------------
@api.get("/decision-support/notes")
def get_notes():
    return _ok({"notes": _store().get_research_notes()})


@api.post("/decision-support/notes")
def set_notes():
    update = ResearchNotesUpdate.model_validate(request.get_json(silent=True))
    _store().set_research_notes(update.notes)
    return _ok({"message": "Research notes updated"})
