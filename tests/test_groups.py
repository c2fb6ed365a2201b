from urllib.parse import unquote_plus

import pytest

from wrike.params.common import Avatar, Metadata, encode, encode_values
from wrike.params.groups import CreateGroup, ModifyGroup, QueryGroup, QueryGroups

META = [Metadata(key="testMetaKey", value="testMetaValue")]


@pytest.mark.parametrize(
    "params, expected",
    [
        (
            CreateGroup(
                title="Test",
                members=["KUAAAAHK", "KUAAAAAQ"],
                parent="KX77777I",
                avatar=Avatar(letters="TG", color="#e7fac6"),
                metadata=META,
            ),
            'avatar={"letters":"TG","color":"#e7fac6"}'
            '&members=["KUAAAAHK","KUAAAAAQ"]'
            '&metadata=[{"key":"testMetaKey","value":"testMetaValue"}]'
            "&parent=KX77777I&title=Test",
        ),
        (
            ModifyGroup(
                title="New test group",
                add_members=["KUAAAAAQ"],
                remove_members=["KUAAAAHK"],
                parent="KX77777I",
                avatar=Avatar(letters="NG", color="#c5cbd9"),
                metadata=META,
            ),
            'addMembers=["KUAAAAAQ"]'
            '&avatar={"letters":"NG","color":"#c5cbd9"}'
            '&metadata=[{"key":"testMetaKey","value":"testMetaValue"}]'
            '&parent=KX77777I&removeMembers=["KUAAAAHK"]&title=New test group',
        ),
    ],
)
def test_encoded_body(params, expected):
    assert unquote_plus(encode(params)) == expected


@pytest.mark.parametrize(
    "params, expected",
    [
        (CreateGroup(), {}),
        (ModifyGroup(title=""), {"title": [""]}),
        (QueryGroup(fields=["metadata"]), {"fields": ['["metadata"]']}),
        (
            QueryGroups(metadata=Metadata(key="k", value="v")),
            {"metadata": ['{"key":"k","value":"v"}']},
        ),
    ],
)
def test_encoded_values(params, expected):
    assert encode_values(params) == expected