import pytest

from core.domain.models import (
    ConfigOutcome,
    FieldOutcome,
    FieldStatus,
    FlowStatus,
    IdentityField,
    Scope,
)


@pytest.mark.parametrize(
    "scope, flag, label",
    [
        (Scope.GLOBAL, "--global", "global"),
        (Scope.LOCAL, "--local", "local"),
        (Scope.SYSTEM, "--system", "system"),
    ],
)
def test_scope_maps_to_fixed_flag_and_label(scope, flag, label):
    assert scope.flag == flag
    assert scope.label == label
    assert Scope.from_option(scope.option) is scope


def test_scope_menu_order_has_global_first():
    assert [s.option for s in Scope] == [
        "Global (applies to all repos)",
        "Local (applies only to this repo)",
        "System (rarely used, for all users)",
    ]
    assert Scope.default() is Scope.GLOBAL


def test_unknown_option_falls_back_to_global():
    assert Scope.from_option("something else") is Scope.GLOBAL


def test_identity_field_trims_and_treats_whitespace_as_empty():
    assert IdentityField(key="user.name", value="  Ada Lovelace \t").value == "Ada Lovelace"
    assert IdentityField(key="user.email", value="   \n").is_empty


def test_outcome_any_set():
    outcome = ConfigOutcome(
        status=FlowStatus.APPLIED,
        scope=Scope.GLOBAL,
        results=[
            FieldOutcome(key="user.name", status=FieldStatus.FAILED, error="boom"),
            FieldOutcome(key="user.email", status=FieldStatus.SKIPPED),
        ],
    )
    assert not outcome.any_set
