"""Loading build snapshots from YAML or JSON files."""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import ValidationError

from buildchat.snapshot.build import BuildRecord


class BuildSnapshotError(ValueError):
    """A build snapshot file is missing or malformed."""


def load_build(path: Path) -> BuildRecord:
    """Read a BuildRecord from a YAML (or JSON) file.

    Raises:
        BuildSnapshotError: If the file is unreadable, is not a
            mapping, or does not describe a valid build
    """
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise BuildSnapshotError(f"Cannot read {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise BuildSnapshotError(f"{path} is not valid UTF-8: {e}") from e
    except yaml.YAMLError as e:
        raise BuildSnapshotError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(data, dict):
        raise BuildSnapshotError(f"{path} does not contain a mapping")

    try:
        return BuildRecord.model_validate(data)
    except ValidationError as e:
        raise BuildSnapshotError(f"Invalid build snapshot {path}: {e}") from e
