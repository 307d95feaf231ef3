"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- Validation and normalisation (trimming) happen once, at construction.
- Outcomes are plain data the CLI can render without knowing how they
  were produced.

Note:
- These models describe *what* a run decided, not *how* git was called.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict


class Scope(str, Enum):
    """Breadth of applicability of a git configuration value.

    Member order is the menu order; GLOBAL is the default position.
    """

    GLOBAL = "global"
    LOCAL = "local"
    SYSTEM = "system"

    @property
    def flag(self) -> str:
        """Command-line token passed to `git config`."""

        return f"--{self.value}"

    @property
    def label(self) -> str:
        return self.value

    @property
    def option(self) -> str:
        """Menu text shown by the prompter."""

        return _SCOPE_OPTIONS[self]

    @classmethod
    def default(cls) -> "Scope":
        return cls.GLOBAL

    @classmethod
    def from_option(cls, text: str) -> "Scope":
        """Map a selected menu text back to its scope.

        Unknown text falls back to the default, mirroring the menu's
        default position.
        """

        for scope, option in _SCOPE_OPTIONS.items():
            if option == text:
                return scope
        return cls.default()


_SCOPE_OPTIONS: dict[Scope, str] = {
    Scope.GLOBAL: "Global (applies to all repos)",
    Scope.LOCAL: "Local (applies only to this repo)",
    Scope.SYSTEM: "System (rarely used, for all users)",
}


NAME_KEY = "user.name"
EMAIL_KEY = "user.email"

# Prompt order: name, then email.
IDENTITY_KEYS: tuple[tuple[str, str], ...] = (
    (NAME_KEY, "Username (user.name)"),
    (EMAIL_KEY, "Email (user.email)"),
)


class IdentityField(BaseModel):
    """A git identity key and the value the user typed for it."""

    model_config = ConfigDict(frozen=True)

    key: str = Field(..., min_length=1, description="git config key, e.g. 'user.name'.")
    prompt: str = Field(default="", description="Label shown when asking for the value.")
    value: str = Field(default="", description="User-supplied value, trimmed.")

    @field_validator("value", mode="before")
    @classmethod
    def _strip(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip()
        return value

    @property
    def is_empty(self) -> bool:
        return self.value == ""


class CommandResult(BaseModel):
    """Outcome of a single git invocation."""

    model_config = ConfigDict(frozen=True)

    args: list[str] = Field(default_factory=list, description="Arguments after the executable.")
    returncode: int = Field(..., description="Process exit status.")
    stdout: str = Field(default="")
    stderr: str = Field(default="")

    @property
    def ok(self) -> bool:
        return self.returncode == 0


class FieldStatus(str, Enum):
    SET = "set"
    SKIPPED = "skipped"
    FAILED = "failed"


class FieldOutcome(BaseModel):
    """What happened to one identity field during the apply step."""

    key: str
    value: str = ""
    status: FieldStatus
    error: str | None = Field(
        default=None,
        description="Underlying cause when status is FAILED.",
    )


class FlowStatus(str, Enum):
    """Terminal state reached by the configuration flow."""

    CANCELLED = "cancelled"
    NOT_IN_REPOSITORY = "not_in_repository"
    NOTHING_ENTERED = "nothing_entered"
    APPLIED = "applied"


class ConfigOutcome(BaseModel):
    """Aggregate result of one `gix config` run.

    Why a model instead of printing from the service:
    - Keeps terminal output in the CLI layer.
    - Lets tests assert on decisions rather than on captured text.
    """

    status: FlowStatus
    scope: Scope | None = None
    results: list[FieldOutcome] = Field(default_factory=list)

    @property
    def any_set(self) -> bool:
        return any(f.status is FieldStatus.SET for f in self.results)
