"""Shared BDD fixtures and step definitions for the Identity context."""

import pytest
from protean import current_domain
from pytest_bdd import given, parsers

from marketplace.identity.user import credentials
from marketplace.identity.user.account import DeleteAccount
from marketplace.identity.user.verification import VerifyEmail


@pytest.fixture()
def account():
    """Mutable holder for the account under test."""
    return {}


@pytest.fixture()
def outcome():
    """Mutable holder for the result or error of the When step."""
    return {}


@given(parsers.cfparse('a user signed up as "{email}" with password "{password}"'))
def signed_up_user(account, email, password):
    result = credentials.sign_up(email, password, password)
    account.update(email=email, user_id=result["user_id"], token=result["token"])


@given("the user verified their email")
def user_verified(account):
    current_domain.process(VerifyEmail(token=account["token"]), asynchronous=False)


@given("the user deleted their account")
def user_deleted(account):
    current_domain.process(DeleteAccount(user_id=account["user_id"]), asynchronous=False)
