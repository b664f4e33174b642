"""Role and unit based access decisions for assets.

Single source of truth for "may user U do action A on asset X". Every view
(list, detail, form, dashboard, report) consumes these functions instead of
re-implementing role checks.

Rules:
    admin   → view, create, edit, delete everything
    editor  → view/edit assets of its allowed units, create, never delete
    viewer  → view assets of its allowed units, nothing else

A missing or unrecognised role is treated as ``viewer``. An editor or viewer
with no allowed units falls back to ``AccessPolicyConfig.unscoped_access``.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from sidak.domain.entities import Asset, Role, UserContext


@dataclass(frozen=True)
class AccessPolicyConfig:
    """Explicit policy configuration, passed in at call time.

    unscoped_access: what an editor/viewer with an empty ``allowed_units``
        may reach. True keeps the legacy "unrestricted" behaviour; False
        denies access until units are granted.
    """

    unscoped_access: bool = True


DEFAULT_POLICY = AccessPolicyConfig()


def effective_role(user: UserContext | None) -> Role:
    """Normalise the caller's role, falling back to the most restrictive one."""
    if user is None or not user.role:
        return Role.VIEWER
    try:
        return Role(str(user.role).strip().lower())
    except ValueError:
        return Role.VIEWER


def _unit_in_scope(
    user: UserContext | None, unit: str | None, config: AccessPolicyConfig
) -> bool:
    allowed = user.allowed_units if user is not None else ()
    if allowed:
        return unit in allowed
    return config.unscoped_access


def can_view(
    user: UserContext | None, asset: Asset, config: AccessPolicyConfig = DEFAULT_POLICY
) -> bool:
    if effective_role(user) is Role.ADMIN:
        return True
    return _unit_in_scope(user, asset.unit, config)


def can_create(user: UserContext | None) -> bool:
    return effective_role(user) in (Role.ADMIN, Role.EDITOR)


def can_edit(
    user: UserContext | None, asset: Asset, config: AccessPolicyConfig = DEFAULT_POLICY
) -> bool:
    role = effective_role(user)
    if role is Role.ADMIN:
        return True
    if role is Role.EDITOR:
        return _unit_in_scope(user, asset.unit, config)
    return False


def can_delete(user: UserContext | None, asset: Asset) -> bool:
    return effective_role(user) is Role.ADMIN


def filter_visible(
    user: UserContext | None,
    assets: Iterable[Asset],
    config: AccessPolicyConfig = DEFAULT_POLICY,
) -> list[Asset]:
    """Return the visible subset of ``assets``, preserving input order."""
    return [asset for asset in assets if can_view(user, asset, config)]


def units_for_user(
    user: UserContext | None,
    all_units: Sequence[str],
    config: AccessPolicyConfig = DEFAULT_POLICY,
) -> list[str]:
    """Units the user may assign to an asset in a create/edit form."""
    if effective_role(user) is Role.ADMIN:
        return list(all_units)
    if user is not None and user.allowed_units:
        return list(user.allowed_units)
    return list(all_units) if config.unscoped_access else []
