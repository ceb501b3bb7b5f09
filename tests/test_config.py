import pytest
from everett.manager import ConfigDictEnv

from project_status.config import get_config, settings
from project_status.exception import InvalidInputError
from project_status.models import ProjectReference


def config_from(values):
    return get_config([ConfigDictEnv(values)])


def test_settings_reads_action_inputs():
    inputs = settings(config_from({
        "INPUT_PROJECT_URL": "https://github.com/users/octocat/projects/3",
        "INPUT_GITHUB_TOKEN": "secret",
        "INPUT_STATUS": "Done",
        "INPUT_LABELED": "bug, docs",
        "INPUT_TIMEOUT": "5",
    }))
    assert inputs.project == ProjectReference("user", "octocat", 3)
    assert inputs.token == "secret"
    assert inputs.status == "Done"
    assert inputs.labels == frozenset({"bug", "docs"})
    assert inputs.timeout == 5


def test_settings_defaults():
    inputs = settings(config_from({
        "INPUT_PROJECT_URL": "https://github.com/orgs/harvester/projects/7",
        "INPUT_GITHUB_TOKEN": "secret",
        "INPUT_STATUS": "Todo",
    }))
    assert inputs.labels == frozenset()
    assert inputs.timeout == 30


def test_settings_missing_required_input():
    with pytest.raises(InvalidInputError, match="github-token"):
        settings(config_from({
            "INPUT_PROJECT_URL": "https://github.com/orgs/harvester/projects/7",
            "INPUT_STATUS": "Todo",
        }))


def test_settings_empty_required_input():
    with pytest.raises(InvalidInputError, match="status"):
        settings(config_from({
            "INPUT_PROJECT_URL": "https://github.com/orgs/harvester/projects/7",
            "INPUT_GITHUB_TOKEN": "secret",
            "INPUT_STATUS": "",
        }))


def test_settings_invalid_timeout():
    with pytest.raises(InvalidInputError, match="timeout"):
        settings(config_from({
            "INPUT_PROJECT_URL": "https://github.com/orgs/harvester/projects/7",
            "INPUT_GITHUB_TOKEN": "secret",
            "INPUT_STATUS": "Todo",
            "INPUT_TIMEOUT": "soon",
        }))


def test_settings_reads_os_environment(monkeypatch):
    monkeypatch.setenv("INPUT_PROJECT_URL", "github.com/orgs/harvester/projects/7")
    monkeypatch.setenv("INPUT_GITHUB_TOKEN", "secret")
    monkeypatch.setenv("INPUT_STATUS", "Todo")
    monkeypatch.delenv("INPUT_LABELED", raising=False)
    monkeypatch.delenv("INPUT_TIMEOUT", raising=False)

    inputs = settings()
    assert inputs.project.owner_name == "harvester"
