"""Unit tests for role and unit based access decisions."""

from sidak.application.services.access_policy import (
    AccessPolicyConfig,
    can_create,
    can_delete,
    can_edit,
    can_view,
    effective_role,
    filter_visible,
    units_for_user,
)
from sidak.domain.entities import Asset, Role, UserContext

STRICT = AccessPolicyConfig(unscoped_access=False)


def _asset(unit: str) -> Asset:
    return Asset(jenis_inventaris="Perabot", nama_barang="Meja", unit=unit)


def test_effective_role_normalises_case_and_unknown_values():
    assert effective_role(UserContext(role=" ADMIN ")) is Role.ADMIN
    assert effective_role(UserContext(role="superuser")) is Role.VIEWER
    assert effective_role(UserContext(role=None)) is Role.VIEWER
    assert effective_role(None) is Role.VIEWER


def test_admin_can_do_everything():
    admin = UserContext(role="admin", allowed_units=("Unit A",))
    asset = _asset("Unit Z")
    assert can_view(admin, asset)
    assert can_create(admin)
    assert can_edit(admin, asset)
    assert can_delete(admin, asset)


def test_editor_is_scoped_to_allowed_units():
    editor = UserContext(role="editor", allowed_units=("Unit A",))
    assert can_view(editor, _asset("Unit A"))
    assert can_edit(editor, _asset("Unit A"))
    assert not can_view(editor, _asset("Unit B"))
    assert not can_edit(editor, _asset("Unit B"))
    assert can_create(editor)
    assert not can_delete(editor, _asset("Unit A"))


def test_viewer_only_views():
    viewer = UserContext(role="viewer", allowed_units=("Unit A",))
    asset = _asset("Unit A")
    assert can_view(viewer, asset)
    assert not can_create(viewer)
    assert not can_edit(viewer, asset)
    assert not can_delete(viewer, asset)


def test_unknown_role_behaves_like_viewer():
    user = UserContext(role="guest", allowed_units=("Unit A",))
    assert can_view(user, _asset("Unit A"))
    assert not can_edit(user, _asset("Unit A"))
    assert not can_create(user)


def test_unit_match_is_exact():
    editor = UserContext(role="editor", allowed_units=("Unit A",))
    assert not can_view(editor, _asset("unit a"))


def test_empty_allowed_units_follows_config():
    editor = UserContext(role="editor")
    asset = _asset("Unit B")
    assert can_view(editor, asset)
    assert can_edit(editor, asset)
    assert not can_view(editor, asset, STRICT)
    assert not can_edit(editor, asset, STRICT)


def test_filter_visible_preserves_order():
    viewer = UserContext(role="viewer", allowed_units=("Unit A", "Unit C"))
    assets = [_asset("Unit C"), _asset("Unit B"), _asset("Unit A")]
    visible = filter_visible(viewer, assets)
    assert [a.unit for a in visible] == ["Unit C", "Unit A"]


def test_units_for_user():
    all_units = ["Unit A", "Unit B", "Unit C"]
    assert units_for_user(UserContext(role="admin", allowed_units=("Unit A",)), all_units) == all_units
    assert units_for_user(UserContext(role="editor", allowed_units=("Unit B",)), all_units) == ["Unit B"]
    assert units_for_user(UserContext(role="editor"), all_units) == all_units
    assert units_for_user(UserContext(role="editor"), all_units, STRICT) == []


def test_filter_visible_is_idempotent_and_admin_sees_all():
    assets = [_asset("Sekretariat"), _asset("Keuangan")]
    editor = UserContext(role="editor", allowed_units=("Sekretariat",))
    once = filter_visible(editor, assets)
    assert filter_visible(editor, once) == once
    assert filter_visible(UserContext(role="admin"), assets) == assets


def test_out_of_scope_asset_is_never_editable_or_deletable_by_editor():
    editor = UserContext(role="editor", allowed_units=("Sekretariat",))
    other = _asset("Keuangan")
    assert not can_edit(editor, other)
    assert not can_delete(editor, other)
