"""Application configuration."""

from __future__ import annotations

from pathlib import Path

import platformdirs
from pydantic import Field, field_validator, model_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from buildchat.core.base import BaseConfig
from buildchat.core.log import Logger
from buildchat.core.yaml_settings import YamlWithIncludesSettingsSource

# ============================================================
# CONFIG MODELS (loaded from YAML/env/CLI)
# ============================================================

class NotifyPolicy(BaseConfig):
    """Which completed-build results post a chat notification."""

    notify_aborted: bool = Field(
        default=False,
        description="Notify when a build is aborted",
    )
    notify_failure: bool = Field(
        default=True,
        description="Notify when a build fails",
    )
    notify_not_built: bool = Field(
        default=False,
        description="Notify when a build ends as not built",
    )
    notify_back_to_normal: bool = Field(
        default=True,
        description="Notify when a build succeeds right after a failure",
    )
    notify_success: bool = Field(
        default=False,
        description="Notify on every successful build",
    )
    notify_unstable: bool = Field(
        default=False,
        description="Notify when a build is unstable",
    )


class ProjectConfig(BaseConfig):
    """Per-project notification settings."""

    room: str | None = Field(
        default=None,
        description="Chat room for this project (defaults to notifier.room)",
    )
    policy: NotifyPolicy = Field(
        default_factory=NotifyPolicy,
        description="Completion results that trigger a notification",
    )


class NotifierConfig(BaseConfig):
    """Chat notifier settings shared by all projects."""

    build_server_url: str = Field(
        default="http://localhost:8080/",
        description=(
            "Public URL of the build server, used for build links "
            "and status icons"
        ),
    )
    room: str = Field(
        default="",
        description="Default chat room for projects without their own",
    )

    @field_validator("build_server_url")
    @classmethod
    def _trailing_slash(cls, value: str) -> str:
        if not value.endswith("/"):
            value += "/"
        return value


class Config(BaseConfig):
    """Application configuration loaded from YAML/env/CLI."""

    logger: Logger = Field(
        default=None,
        description="Logger configuration and runtime instance"
    )
    notifier: NotifierConfig = Field(
        default_factory=NotifierConfig,
        description="Chat notifier settings"
    )
    projects: dict[str, ProjectConfig] = Field(
        default_factory=dict,
        description="Per-project settings keyed by project name",
    )
    default_project: ProjectConfig = Field(
        default_factory=ProjectConfig,
        description="Settings for projects missing from 'projects'",
    )
    log_root: Path = Field(
        default_factory=(
            lambda: Path(platformdirs.user_state_dir(
                "buildchat", appauthor=False
            ))
        ),
        description="Root directory for log files",
    )

    @model_validator(mode='after')
    def _setup_logger(self) -> 'Config':
        """Install the global logger once config has loaded."""
        from buildchat.core.log import setup_logger

        if self.logger is None:
            self.logger = Logger()

        self.logger = setup_logger(
            log_root=self.log_root,
            service_name="buildchat",
            console=self.logger.console,
            file=self.logger.file,
            logfire=self.logger.logfire,
            level=self.logger.level,
        )
        return self

    def project_for(self, name: str) -> ProjectConfig:
        """Settings for a project, falling back to default_project."""
        return self.projects.get(name, self.default_project)

    def room_for(self, name: str) -> str:
        """Chat room for a project, falling back to notifier.room."""
        return self.project_for(name).room or self.notifier.room


# ============================================================
# STATE
# ============================================================

class State(BaseSettings):
    """Complete application state, as loaded from every source.

    Priority (highest first): CLI arguments and direct arguments,
    YAML files (defaults, user, project, --include), .env,
    BUILDCHAT_ environment variables, file secrets.
    """

    config: Config = Field(
        default_factory=Config,
        description="Application configuration (from YAML/env/CLI)"
    )
    include: list[str] | None = Field(
        default=None,
        description=(
            "Additional YAML files to include and merge. "
            "Use --include on CLI or include: in YAML files."
        ),
    )

    model_config = SettingsConfigDict(
        yaml_file="buildchat.yaml",
        env_file=".env",
        env_prefix="BUILDCHAT_",
        env_nested_delimiter="__",
        cli_parse_args=True,
        cli_implicit_flags=True,
        cli_use_class_docs_for_groups=True,
        arbitrary_types_allowed=True,
        extra='ignore'
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            YamlWithIncludesSettingsSource(settings_cls),
            dotenv_settings,
            env_settings,
            file_secret_settings,
        )


__all__ = [
    "Config",
    "NotifierConfig",
    "NotifyPolicy",
    "ProjectConfig",
    "State",
]
