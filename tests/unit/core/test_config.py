"""Tests for configuration models and loading."""

import sys

import pytest

from buildchat.core.config import (
    Config,
    NotifierConfig,
    NotifyPolicy,
    ProjectConfig,
    State,
)


@pytest.fixture
def quiet_logger():
    return {"console": {"enabled": False}}


def test_policy_defaults():
    policy = NotifyPolicy()
    assert policy.notify_failure
    assert policy.notify_back_to_normal
    assert not policy.notify_success
    assert not policy.notify_unstable
    assert not policy.notify_aborted
    assert not policy.notify_not_built


def test_server_url_gets_trailing_slash():
    config = NotifierConfig(build_server_url="https://ci.example.com")
    assert config.build_server_url == "https://ci.example.com/"


def test_project_lookup_falls_back_to_default(tmp_path, quiet_logger):
    config = Config(
        logger=quiet_logger,
        log_root=tmp_path,
        notifier={"room": "general"},
        projects={
            "api": ProjectConfig(
                room="api-team",
                policy=NotifyPolicy(notify_success=True),
            ),
            "web": ProjectConfig(),
        },
    )
    assert config.project_for("api").policy.notify_success
    assert config.project_for("other") is config.default_project
    assert config.room_for("api") == "api-team"
    assert config.room_for("web") == "general"
    assert config.room_for("other") == "general"


def test_state_loads_project_yaml(tmp_path, monkeypatch):
    monkeypatch.setattr(sys, "argv", ["buildchat"])
    monkeypatch.chdir(tmp_path)
    (tmp_path / "buildchat.yaml").write_text(
        "config:\n"
        "  logger:\n"
        "    console:\n"
        "      enabled: false\n"
        "  notifier:\n"
        "    build_server_url: https://ci.example.com\n"
        "    room: builds\n"
        "  projects:\n"
        "    api:\n"
        "      policy:\n"
        "        notify_unstable: true\n"
    )

    state = State()

    config = state.config
    assert config.notifier.build_server_url == "https://ci.example.com/"
    assert config.room_for("api") == "builds"
    assert config.project_for("api").policy.notify_unstable
    # Package defaults still apply to everything not overridden
    assert config.default_project.policy.notify_failure
    assert not config.logger.file.enabled
