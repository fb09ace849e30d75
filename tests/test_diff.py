from datetime import datetime, timezone

import pytest

from protobom.diff import (
    NodeDiff,
    diff_dates,
    diff_list,
    diff_map,
    diff_nodes,
    diff_slice,
    diff_value,
)
from protobom.enums import (
    ExternalReferenceType,
    HashAlgorithm,
    NodeType,
    Purpose,
    SoftwareIdentifierType,
)
from protobom.externalreference import ExternalReference
from protobom.node import Node
from protobom.person import Person

SHA256_VALUE = "2f2ed83cb80d77c14b7a23284fa73fbe3150a571fdb9388dcce9a7209bb11055"
RIGHTS_NOTICE = "Example rights notice text"


def _test_node():
    return Node(
        id="test-node",
        type=NodeType.PACKAGE,
        name="test",
        version="1.0.0",
        file_name="test.zip",
        url_home="http://example.com/",
        url_download="http://example.com/test-node.zip",
        licenses=["Apache-2.0"],
        license_concluded="Apache-2.0",
        license_comments="License inferred by an automated classifer",
        copyright=RIGHTS_NOTICE,
        source_info="",
        primary_purpose=[Purpose.APPLICATION],
        comment="This a node to test node diffing",
        summary="A non existent node that serves as an example to diff",
        description="A non existent software package that can be used to test data",
        attribution=[],
        suppliers=[
            Person(
                name="Example Org",
                is_org=True,
                email="org@example.com",
                url="http://example.com/org",
            )
        ],
        originators=[],
        release_date=datetime(2023, 10, 16, 11, 41, tzinfo=timezone.utc),
        external_references=[
            ExternalReference(
                url="http://example.com/org",
                type=ExternalReferenceType.VCS,
                comment="Organization Repo",
            )
        ],
        identifiers={int(SoftwareIdentifierType.PURL): "pkg:github/example@1.0.0"},
        hashes={int(HashAlgorithm.SHA1): "781721ca4eccbf8fe65c44dcdf141ca1b4e44adf"},
    )


def _no_change(sut, new):
    pass


def _alter_id(sut, new):
    new.id = "modified"


def _alter_name(sut, new):
    new.name = "newname"


def _alter_name_and_id(sut, new):
    new.id = "modified"
    new.name = "newname"


def _blank_download(sut, new):
    new.url_download = ""


def _add_license(sut, new):
    new.licenses.append("GPL3")


def _remove_license(sut, new):
    sut.licenses = new.licenses + ["GPL3"]


def _add_hash(sut, new):
    new.hashes[int(HashAlgorithm.SHA256)] = SHA256_VALUE


def _remove_hash(sut, new):
    sut.hashes[int(HashAlgorithm.SHA256)] = SHA256_VALUE


def _change_extref(sut, new):
    new.external_references[0].type = ExternalReferenceType.WEBSITE


NODE_DIFF_CASES = [
    ("nochange", _no_change, None),
    ("alter node id", _alter_id, NodeDiff(Node(id="modified"), Node(), 1)),
    ("alter node name", _alter_name, NodeDiff(Node(name="newname"), Node(), 1)),
    (
        "alter node name and id",
        _alter_name_and_id,
        NodeDiff(Node(id="modified", name="newname"), Node(), 2),
    ),
    (
        "blank DownloadURL",
        _blank_download,
        NodeDiff(Node(), Node(url_download="http://example.com/test-node.zip"), 1),
    ),
    ("add a license", _add_license, NodeDiff(Node(licenses=["GPL3"]), Node(), 1)),
    ("remove a license", _remove_license, NodeDiff(Node(), Node(licenses=["GPL3"]), 1)),
    (
        "add a hash",
        _add_hash,
        NodeDiff(Node(hashes={int(HashAlgorithm.SHA256): SHA256_VALUE}), Node(), 1),
    ),
    (
        "remove a hash",
        _remove_hash,
        NodeDiff(Node(), Node(hashes={int(HashAlgorithm.SHA256): SHA256_VALUE}), 1),
    ),
    (
        "change external reference",
        _change_extref,
        NodeDiff(
            Node(
                external_references=[
                    ExternalReference(
                        url="http://example.com/org",
                        type=ExternalReferenceType.WEBSITE,
                        comment="Organization Repo",
                    )
                ]
            ),
            Node(
                external_references=[
                    ExternalReference(
                        url="http://example.com/org",
                        type=ExternalReferenceType.VCS,
                        comment="Organization Repo",
                    )
                ]
            ),
            1,
        ),
    ),
]


@pytest.mark.parametrize("name,prepare,expected", NODE_DIFF_CASES, ids=[c[0] for c in NODE_DIFF_CASES])
def test_node_diff(name, prepare, expected):
    base = _test_node()
    sut = base.copy()
    new = base.copy()
    prepare(sut, new)
    result = diff_nodes(sut, new)
    if expected is None:
        assert result is None
    else:
        assert result is not None
        assert expected.added.equal(result.added), result.added.flat_string()
        assert expected.removed.equal(result.removed), result.removed.flat_string()
        assert result.diff_count == expected.diff_count


def test_node_diff_type_change():
    old = Node(id="x", type=NodeType.PACKAGE)
    new = Node(id="x", type=NodeType.FILE)
    result = diff_nodes(old, new)
    assert result.added.type == NodeType.FILE
    assert result.diff_count == 1


@pytest.mark.parametrize(
    "old,new,added,removed,count",
    [("a", "a", "", "", 0), ("", "a", "a", "", 1), ("a", "", "", "a", 1)],
    ids=["no change", "change", "remove"],
)
def test_diff_string(old, new, added, removed, count):
    assert diff_value(old, new) == (added, removed, count)


@pytest.mark.parametrize(
    "old,new,added,removed,count",
    [
        (["a", "b"], ["a", "b"], [], [], 0),
        ([], ["a"], ["a"], [], 1),
        (["a"], ["a", "b"], ["b"], [], 1),
        (["a", "b"], [], [], ["a", "b"], 1),
        (["a", "b"], ["b"], [], ["a"], 1),
    ],
    ids=["no change", "add to blank", "add to existing", "remove all", "remove one"],
)
def test_diff_str_slice(old, new, added, removed, count):
    assert diff_slice(old, new) == (added, removed, count)


T1 = datetime(2023, 11, 15, 13, 30, tzinfo=timezone.utc)
T2 = datetime(2000, 1, 1, 13, 0, tzinfo=timezone.utc)


@pytest.mark.parametrize(
    "old,new,added,removed,count",
    [
        (T1, T1, None, None, 0),
        (None, None, None, None, 0),
        (T1, T2, T2, None, 1),
        (T2, None, None, T2, 1),
        (None, T1, T1, None, 1),
    ],
    ids=["nochange", "nochange blank", "change", "remove", "set"],
)
def test_diff_dates(old, new, added, removed, count):
    a, r, c = diff_dates(old, new)
    assert a is added
    assert r is removed
    assert c == count


def test_diff_dates_ignores_subsecond():
    a = datetime(2023, 1, 1, 0, 0, 0, 100, tzinfo=timezone.utc)
    b = datetime(2023, 1, 1, 0, 0, 0, 900, tzinfo=timezone.utc)
    assert diff_dates(a, b) == (None, None, 0)


P1 = Person(name="Corelia Enterprises", is_org=True)
P2 = Person(name="Turbowind Enterprises", is_org=True)
P3 = Person(name="Inky")


@pytest.mark.parametrize(
    "old,new,added,removed,count",
    [
        ([P1, P2], [P1, P2], [], [], 0),
        ([P1], [P1, P2], [P2], [], 1),
        ([P1, P2], [P1], [], [P2], 1),
        ([P1, P2], [P1, P3], [P3], [P2], 1),
    ],
    ids=["no change", "add", "remove", "add and remove"],
)
def test_diff_person_list(old, new, added, removed, count):
    assert diff_list(old, new) == (added, removed, count)


ER1 = ExternalReference(url="https://example.com/", type=ExternalReferenceType.VCS)
ER2 = ExternalReference(url="https://example.net/", type=ExternalReferenceType.VCS)
ER3 = ExternalReference(url="https://example.org/", type=ExternalReferenceType.VCS)


@pytest.mark.parametrize(
    "old,new,added,removed,count",
    [
        ([ER1, ER2], [ER1, ER2], [], [], 0),
        ([ER1], [ER1, ER2], [ER2], [], 1),
        ([ER1, ER2], [ER1], [], [ER2], 1),
        ([ER1, ER2], [ER1, ER3], [ER3], [ER2], 1),
    ],
    ids=["no change", "add", "remove", "add and remove"],
)
def test_diff_extref_list(old, new, added, removed, count):
    assert diff_list(old, new) == (added, removed, count)


SHA1 = int(HashAlgorithm.SHA1)
SHA256 = int(HashAlgorithm.SHA256)
M1 = {
    SHA1: "68e6e3665b3010f0979089079d7f554c940e3aa8",
    SHA256: "d02b22ab7fc76fe2a17e768b180bf5048889dbcae3a6d7e4a889a916848e5d11",
}
M2 = {
    SHA1: "68e6e3665b3010f0979089079d7f554c940e3aa8",
    SHA256: "a8a20fe2e556080457d718930bfe1f423100952fdb3cffe9b1f0831be96fd85e",
}


@pytest.mark.parametrize(
    "old,new,added,removed,count",
    [
        (M1, M1, {}, {}, 0),
        (M1, M2, {SHA256: M2[SHA256]}, {}, 1),
        (M1, {SHA256: M1[SHA256]}, {}, {SHA1: M1[SHA1]}, 1),
        (M1, {SHA256: M2[SHA256]}, {SHA256: M2[SHA256]}, {SHA1: M1[SHA1]}, 1),
    ],
    ids=["no change", "change", "remove", "add and remove"],
)
def test_diff_int_str_map(old, new, added, removed, count):
    assert diff_map(old, new) == (added, removed, count)