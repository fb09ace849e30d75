from protobom.person import Person


def test_flat_string_full():
    person = Person(
        name="ACME, Inc",
        is_org=True,
        email="acme@example.com",
        url="http://acme-fixtures.com",
    )
    assert person.flat_string() == (
        "n(ACME, Inc)o(true)email(acme@example.com)url(http://acme-fixtures.com)"
    )


def test_flat_string_minimal_and_contacts():
    assert Person(name="Inky").flat_string() == "n(Inky)o(false)"
    parent = Person(name="Org", is_org=True, contacts=[Person(name="Inky")])
    flat = parent.flat_string()
    assert flat.endswith("c(" + Person(name="Inky").flat_string() + ")")
    assert "c()" in Person(name="x", contacts=[]).flat_string()


def test_flat_string_phone_included():
    person = Person(name="Desk", phone="front desk")
    assert "p(front desk)" in person.flat_string()


def test_client_string():
    assert Person(name="John Doe").to_spdx2_client_string() == "John Doe"
    assert (
        Person(name="John Doe", email="john@example.com").to_spdx2_client_string()
        == "John Doe (john@example.com)"
    )


def test_client_org():
    assert Person(name="a", is_org=True).to_spdx2_client_org() == "Organization"
    assert Person(name="a").to_spdx2_client_org() == "Person"


def test_copy_is_deep_and_equal():
    original = Person(
        name="Corelia Enterprises",
        is_org=True,
        email="corelia@example.com",
        contacts=[Person(name="Inky", email="inky@example.com")],
    )
    copied = original.copy()
    assert copied == original
    assert copied.flat_string() == original.flat_string()
    original.contacts[0].name = "changed"
    original.name = "changed too"
    assert copied.contacts[0].name == "Inky"
    assert copied.name == "Corelia Enterprises"
    assert len(original.contacts) == 1