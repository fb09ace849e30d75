from protobom.enums import ExternalReferenceType, HashAlgorithm
from protobom.externalreference import ExternalReference


def test_flat_string_matches_format():
    ref = ExternalReference(
        url="http://github.com/external",
        type=ExternalReferenceType.VCS,
        comment="GitHub Link",
    )
    assert ref.flat_string() == "(t)56(u)http://github.com/external(c)GitHub Link"


def test_flat_string_type_only_and_authority():
    assert ExternalReference().flat_string() == "(t)0"
    ref = ExternalReference(type=ExternalReferenceType.WEBSITE, authority="auth")
    assert ref.flat_string() == f"(t){int(ExternalReferenceType.WEBSITE)}(a)auth"


def test_flat_string_distinguishes_types():
    a = ExternalReference(url="https://example.com/", type=ExternalReferenceType.VCS)
    b = ExternalReference(url="https://example.com/", type=ExternalReferenceType.WEBSITE)
    assert a.flat_string() != b.flat_string()
    assert a.flat_string() == a.copy().flat_string()


def test_copy_is_independent():
    original = ExternalReference(
        url="https://example.org/",
        type=ExternalReferenceType.VCS,
        comment="repo",
        hashes={int(HashAlgorithm.SHA1): "abc"},
    )
    copied = original.copy()
    assert copied == original
    original.hashes[int(HashAlgorithm.SHA1)] = "changed"
    original.url = "https://example.net/"
    assert copied.hashes == {int(HashAlgorithm.SHA1): "abc"}
    assert copied.url == "https://example.org/"