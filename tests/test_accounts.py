from urllib.parse import unquote_plus

import pytest

from wrike.params.accounts import (
    ModifyAccount,
    ModifyContact,
    ModifyUser,
    Profile,
    QueryAccounts,
    QueryContacts,
)
from wrike.params.common import Metadata, encode, encode_values

META = Metadata("testMetaKey", "testMetaValue")
META_JSON = '{"key":"testMetaKey","value":"testMetaValue"}'


@pytest.mark.parametrize(
    "params, expected",
    [
        (ModifyAccount(metadata=[META]), f"metadata=[{META_JSON}]"),
        (ModifyContact(metadata=[META]), f"metadata=[{META_JSON}]"),
        (
            ModifyUser(
                profile=Profile(account_id="IEAAAAAQ", role="Collaborator", external=True)
            ),
            'profile={"accountId":"IEAAAAAQ","role":"Collaborator","external":true}',
        ),
        (
            QueryAccounts(fields=["customFields", "subscription", "metadata"]),
            'fields=["customFields","subscription","metadata"]',
        ),
    ],
)
def test_encoded_body(params, expected):
    assert unquote_plus(encode(params)) == expected


@pytest.mark.parametrize(
    "params, expected",
    [
        (QueryAccounts(metadata=META), {"metadata": [META_JSON]}),
        (QueryContacts(me=False, deleted=True), {"me": ["false"], "deleted": ["true"]}),
    ],
)
def test_encoded_values(params, expected):
    assert encode_values(params) == expected


@pytest.mark.parametrize("cls", [QueryAccounts, ModifyAccount, ModifyUser])
def test_empty_params_encode_to_nothing(cls):
    assert encode(cls()) == ""


def test_profile_leaves_out_unset_fields():
    assert Profile(role="User").to_json() == '{"role":"User"}'
    assert Profile(external=False).to_dict() == {"external": False}