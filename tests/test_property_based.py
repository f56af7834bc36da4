"""Property-based tests for formfields."""

from hypothesis import given
from hypothesis import strategies as st

from formfields import (
    BoolField,
    DoubleField,
    Err,
    IntegerField,
    MinLength,
    Node,
    Ok,
    StringField,
    UnsignedIntegerField,
)

# JSON-like payloads a request parser could produce
scalars = st.one_of(
    st.none(),
    st.booleans(),
    st.integers(),
    st.floats(allow_nan=False),
    st.text(max_size=20),
)
payloads = st.recursive(
    scalars,
    lambda children: st.one_of(
        st.lists(children, max_size=3),
        st.dictionaries(st.text(max_size=5), children, max_size=3),
    ),
    max_leaves=5,
)

FIELDS = [
    StringField(MinLength(2)),
    IntegerField(),
    UnsignedIntegerField(),
    DoubleField(),
    BoolField(),
]


@given(st.text())
def test_strings_pass_unchanged(text):
    assert StringField().validate(Node(text)) == Ok(Node(text))


@given(st.integers())
def test_integers_pass_integer_field(n):
    assert IntegerField().validate(Node(n)) == Ok(Node(n))


@given(st.floats(allow_nan=False, allow_infinity=False))
def test_doubles_never_pass_integer_field(x):
    assert isinstance(IntegerField().validate(Node(x)), Err)
    assert isinstance(UnsignedIntegerField().validate(Node(x)), Err)


@given(st.integers(max_value=-1))
def test_negative_never_passes_unsigned(n):
    result = UnsignedIntegerField().validate(Node(n))
    assert result == Err(UnsignedIntegerField().validate(Node(-1)).error)


@given(payloads)
def test_bool_field_never_fails(value):
    assert isinstance(BoolField().validate(Node(value)), Ok)


@given(payloads)
def test_validate_is_idempotent(value):
    node = Node(value)
    for field in FIELDS:
        assert field.validate(node) == field.validate(node)


@given(payloads)
def test_failures_are_never_empty(value):
    for field in FIELDS:
        result = field.validate(Node(value))
        if isinstance(result, Err):
            assert len(result.error) >= 1
