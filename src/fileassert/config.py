from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from expandvars import expandvars
from pydantic import BaseModel, ConfigDict, field_validator


class PathDisplay(BaseModel):
    """Cosmetic rewrite of paths shown in diagnostics.

    Replaces the first occurrence of ``remove`` with ``add``. Only the text
    shown to the user changes; checks always run against the real path.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)
    remove: str = ""
    add: str = ""

    def apply(self, path: str) -> str:
        if not self.remove:
            return path
        return path.replace(self.remove, self.add, 1)


class FileContainsSpec(BaseModel):
    model_config = ConfigDict(extra="forbid")
    path: str
    pattern: str


class FileSizeSpec(BaseModel):
    model_config = ConfigDict(extra="forbid")
    path: str
    size: int | str


class FileExistsAssertion(BaseModel):
    model_config = ConfigDict(extra="forbid")
    file_exists: str
    weight: float = 1.0


class FileNotExistsAssertion(BaseModel):
    model_config = ConfigDict(extra="forbid")
    file_not_exists: str
    weight: float = 1.0


class FileEmptyAssertion(BaseModel):
    model_config = ConfigDict(extra="forbid")
    file_empty: str
    weight: float = 1.0


class FileNotEmptyAssertion(BaseModel):
    model_config = ConfigDict(extra="forbid")
    file_not_empty: str
    weight: float = 1.0


class FileContainsAssertion(BaseModel):
    model_config = ConfigDict(extra="forbid")
    file_contains: FileContainsSpec
    weight: float = 1.0


class FileNotContainsAssertion(BaseModel):
    model_config = ConfigDict(extra="forbid")
    file_not_contains: FileContainsSpec
    weight: float = 1.0


class FileSizeEqualsAssertion(BaseModel):
    model_config = ConfigDict(extra="forbid")
    file_size_equals: FileSizeSpec
    weight: float = 1.0


Assertion = (
    FileExistsAssertion
    | FileNotExistsAssertion
    | FileEmptyAssertion
    | FileNotEmptyAssertion
    | FileContainsAssertion
    | FileNotContainsAssertion
    | FileSizeEqualsAssertion
)


class SuiteConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str = "fileassert"
    path_display: PathDisplay = PathDisplay()
    assertions: list[Assertion]

    @field_validator("assertions")
    @classmethod
    def assertions_must_not_be_empty(cls, v: list[Any]) -> list[Any]:
        if not v:
            raise ValueError("assertions must not be empty")
        return v


def _expand(value: str) -> str:
    try:
        return expandvars(value, nounset=True)
    except Exception as e:
        raise ValueError(f"cannot expand path '{value}': {e}") from e


def _resolve(value: str, base_dir: Path) -> str:
    """Expand ${VAR} references and anchor relative paths at *base_dir*."""
    expanded = _expand(value)
    path = Path(expanded)
    if not path.is_absolute():
        return str(base_dir / path)
    return expanded


def load_config(path: Path) -> SuiteConfig:
    """Load and validate an assertion suite from a YAML file."""
    config_dir = path.parent.resolve()

    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    config = SuiteConfig(**raw)

    display = config.path_display
    if display.remove:
        config.path_display = PathDisplay(
            remove=_expand(display.remove), add=_expand(display.add)
        )

    # Paths in the suite are relative to the YAML file, not the cwd
    for assertion in config.assertions:
        key = next(k for k in type(assertion).model_fields if k != "weight")
        value = getattr(assertion, key)
        if isinstance(value, str):
            setattr(assertion, key, _resolve(value, config_dir))
        else:
            value.path = _resolve(value.path, config_dir)

    return config
