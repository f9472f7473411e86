import pytest

from checkpoint.config.preprocessor import ConfigValue, EnvVarPreprocessor
from checkpoint.core.exceptions import ConfigurationError


@pytest.mark.unit
@pytest.mark.config
def test_env_replacement_scalar():
    pre = EnvVarPreprocessor({"API_TOKEN": "secret"})

    result = pre.process("Bearer ${API_TOKEN}")

    assert result == "Bearer secret"


@pytest.mark.unit
@pytest.mark.config
def test_env_replacement_nested():
    pre = EnvVarPreprocessor({"HOST_PATH": "/items/1"})

    data: ConfigValue = {"checks": [{"path": "${HOST_PATH}", "headers": {"X-Path": "${HOST_PATH}"}}]}

    result = pre.process(data)

    assert isinstance(result, dict)
    check = result["checks"][0]
    assert check["path"] == "/items/1"
    assert check["headers"]["X-Path"] == "/items/1"


@pytest.mark.unit
@pytest.mark.config
def test_default_used_when_unset():
    pre = EnvVarPreprocessor({})

    assert pre.process("${METHOD:-POST}") == "POST"
    assert pre.process("${EMPTY_DEFAULT:-}") == ""


@pytest.mark.unit
@pytest.mark.config
def test_set_variable_beats_default():
    pre = EnvVarPreprocessor({"METHOD": "PUT"})

    assert pre.process("${METHOD:-POST}") == "PUT"


@pytest.mark.unit
@pytest.mark.config
def test_unset_variable_without_default_raises():
    pre = EnvVarPreprocessor({})

    with pytest.raises(ConfigurationError, match="MISSING"):
        pre.process({"token": "${MISSING}"})


@pytest.mark.unit
@pytest.mark.config
def test_non_string_values_are_untouched():
    pre = EnvVarPreprocessor({})

    assert pre.process([1, 2.5, True, None]) == [1, 2.5, True, None]


@pytest.mark.unit
@pytest.mark.config
def test_reads_process_environment_by_default(monkeypatch):
    monkeypatch.setenv("CHECKPOINT_TEST_VAR", "from-env")

    assert EnvVarPreprocessor().process("${CHECKPOINT_TEST_VAR}") == "from-env"
