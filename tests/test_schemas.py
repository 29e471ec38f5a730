import pytest
from pydantic import ValidationError

from schemas import MAX_NOTES_LENGTH, ResearchNotesUpdate, RunConfig, RunStatus


def test_run_status_values():
    assert [s.value for s in RunStatus] == ["idle", "running", "completed", "error"]
    assert RunStatus("running") is RunStatus.RUNNING


def test_run_config_serializes_with_wire_names():
    config = RunConfig.model_validate({"ansatz": "uccsd", "optimizer": "cobyla", "layers": 4, "stepSize": 0.01})
    assert config.layer_count == 4
    assert config.model_dump(by_alias=True) == {
        "ansatz": "uccsd", "optimizer": "cobyla", "layers": 4, "stepSize": 0.01,
    }


def test_run_config_ignores_unknown_fields():
    config = RunConfig.model_validate(
        {"ansatz": "uccsd", "optimizer": "cobyla", "layers": 4, "stepSize": 0.01, "backend": "ionq-aria"}
    )
    assert not hasattr(config, "backend")


def test_run_config_rejects_bool_layers():
    with pytest.raises(ValidationError):
        RunConfig.model_validate({"ansatz": "uccsd", "optimizer": "cobyla", "layers": True, "stepSize": 0.01})


def test_step_size_upper_bound():
    with pytest.raises(ValidationError):
        RunConfig.model_validate({"ansatz": "uccsd", "optimizer": "cobyla", "layers": 4, "stepSize": 1})


def test_notes_length_boundary():
    assert ResearchNotesUpdate(notes="a" * MAX_NOTES_LENGTH).notes == "a" * MAX_NOTES_LENGTH
    with pytest.raises(ValidationError):
        ResearchNotesUpdate(notes="a" * (MAX_NOTES_LENGTH + 1))


@pytest.mark.parametrize("value", ["0.05", b"0.05"])
def test_step_size_rejects_numeric_strings(value):
    with pytest.raises(ValidationError):
        RunConfig.model_validate({"ansatz": "uccsd", "optimizer": "cobyla", "layers": 4, "stepSize": value})


def test_step_size_accepts_int_json_number_in_strict_mode():
    # 0 is an int but still below the lower bound
    with pytest.raises(ValidationError) as info:
        RunConfig.model_validate({"ansatz": "uccsd", "optimizer": "cobyla", "layers": 4, "stepSize": 0})
    assert info.value.errors()[0]["type"] == "greater_than_equal"
