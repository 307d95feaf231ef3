"""Identity configuration flow.

The CLI delegates the whole `gix config` decision sequence to this module:
scope selection, the local-scope repository check, value collection and
the per-field apply step. Side-effects on the terminal stay in the CLI,
which renders the returned `ConfigOutcome`.

States: ScopeSelection -> PreconditionCheck -> ValueCollection -> Apply -> Done.
"""

from __future__ import annotations

import logging

from core.domain.models import (
    IDENTITY_KEYS,
    ConfigOutcome,
    FieldOutcome,
    FieldStatus,
    FlowStatus,
    IdentityField,
    Scope,
)
from core.errors import GitCommandError
from core.interfaces.git import GitRunner
from core.interfaces.prompter import IdentityPrompter

LOG = logging.getLogger(__name__)


def collect_fields(prompter: IdentityPrompter) -> list[IdentityField] | None:
    """Prompt for every identity key in order; None if the user cancels."""

    fields: list[IdentityField] = []
    for key, label in IDENTITY_KEYS:
        value = prompter.prompt_value(label, "")
        if value is None:
            LOG.info("value prompt for %s cancelled", key)
            return None
        fields.append(IdentityField(key=key, prompt=label, value=value))
    return fields


def apply_field(runner: GitRunner, scope: Scope, field: IdentityField) -> FieldOutcome:
    """Apply one field; git failures become a FAILED outcome."""

    if field.is_empty:
        return FieldOutcome(key=field.key, status=FieldStatus.SKIPPED)

    try:
        runner.apply_setting(scope, field.key, field.value)
    except GitCommandError as exc:
        LOG.warning("failed to set %s: %s", field.key, exc)
        return FieldOutcome(
            key=field.key,
            value=field.value,
            status=FieldStatus.FAILED,
            error=str(exc),
        )
    return FieldOutcome(key=field.key, value=field.value, status=FieldStatus.SET)


def configure_identity(prompter: IdentityPrompter, runner: GitRunner) -> ConfigOutcome:
    """Run one pass of the identity configuration state machine.

    - The repository probe runs before any value prompt, and only for the
      local scope.
    - Fields are applied independently: a failure on one never prevents
      the attempt on the other.
    - No git invocation happens when both values are empty.
    """

    scope = prompter.select_scope()
    if scope is None:
        return ConfigOutcome(status=FlowStatus.CANCELLED)
    LOG.debug("selected scope %s (%s)", scope.label, scope.flag)

    if scope is Scope.LOCAL and not runner.is_inside_repository():
        return ConfigOutcome(status=FlowStatus.NOT_IN_REPOSITORY, scope=scope)

    fields = collect_fields(prompter)
    if fields is None:
        return ConfigOutcome(status=FlowStatus.CANCELLED, scope=scope)

    if all(f.is_empty for f in fields):
        return ConfigOutcome(status=FlowStatus.NOTHING_ENTERED, scope=scope)

    outcomes = [apply_field(runner, scope, f) for f in fields]
    return ConfigOutcome(status=FlowStatus.APPLIED, scope=scope, results=outcomes)
