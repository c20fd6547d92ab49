from webmutate.contracts.enums import FormatFlag, WebMethod
from webmutate.mutate.dedup import DedupSet, dedup_key
from webmutate.vectors import FormVector, LinkVector


def _form(**fields):
    return FormVector("http://target.local/login", fields, method="POST")


def test_key_ignores_bookkeeping():
    a = _form(user="x", pw="y")
    b = a.clone()
    b.seed = "<script>"
    b.affected_input_name = "user"
    b.format = FormatFlag.APPEND

    assert dedup_key(a) == dedup_key(b)


def test_key_ignores_field_order():
    assert dedup_key(_form(user="x", pw="y")) == dedup_key(_form(pw="y", user="x"))


def test_key_covers_transmitted_state():
    base = _form(user="x")

    other_method = base.clone()
    other_method.method = WebMethod.GET

    other_target = base.clone()
    other_target.target = "http://target.local/other"

    other_value = base.clone()
    other_value["user"] = "z"

    keys = {dedup_key(v) for v in (base, other_method, other_target, other_value)}
    assert len(keys) == 4


def test_membership():
    generated = DedupSet()
    v = _form(user="x")

    assert v not in generated
    generated.add(v)

    twin = v.clone()
    twin.seed = "different seed"
    assert twin in generated
    assert generated.contains(twin)
    assert len(generated) == 1

    generated.add(twin)
    assert len(generated) == 1


def test_kind_is_not_part_of_the_key():
    form = FormVector("http://target.local/p", {"a": "1"}, method="GET")
    link = LinkVector("http://target.local/p", {"a": "1"}, method="GET")

    assert form in DedupSet([link])


def test_non_vectors_are_never_members():
    assert "http://target.local" not in DedupSet()
