import pytest

from models.user_model import Role, User
from utils.auth import Access, authorize
from utils.errors import ApprovalRequiredError, AuthorizationError


def user(role, approved):
    return User(name="Test User", email="t@college.edu", password="x", role=role, is_approved=approved)


def test_any_role_passes_open_rule():
    for role in Role:
        authorize(user(role.value, False), Access())


def test_role_outside_allowed_set_is_rejected():
    with pytest.raises(AuthorizationError) as exc:
        authorize(user("student", True), Access(roles=frozenset({Role.ALUMNI, Role.ADMIN})))

    assert exc.value.message == "Access denied. Required role(s): admin, alumni"
    assert exc.value.status_code == 403


def test_approval_gate_blocks_unapproved_alumni():
    with pytest.raises(ApprovalRequiredError):
        authorize(user("alumni", False), Access(roles=frozenset({Role.ALUMNI}), approved=True))


def test_approval_gate_only_when_declared():
    authorize(user("alumni", False), Access(roles=frozenset({Role.ALUMNI})))


def test_approval_gate_ignores_other_roles():
    authorize(user("student", False), Access(approved=True))


def test_role_checked_before_approval():
    with pytest.raises(AuthorizationError) as exc:
        authorize(user("alumni", False), Access(roles=frozenset({Role.STUDENT}), approved=True))

    assert not isinstance(exc.value, ApprovalRequiredError)
