"""Tests for query expressions and evaluation."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from resourcedb.core.query import (
    And,
    CompareOp,
    Comparison,
    ConversionError,
    MemberOf,
    Not,
    Or,
    ProjectionError,
    QueryError,
    Subselect,
    Term,
    and_,
    as_int,
    attribute,
    converted,
    everything,
    execute,
    not_,
    object,
    or_,
    predicate,
    reification_id,
    resource_type,
    statement_id,
    statements,
    subject,
    subselect,
)
from resourcedb.core.statement import ObjectKind, Statement, literal, resource


def _stored(*items: Statement) -> list[Statement]:
    return [s.with_id(i) for i, s in enumerate(items)]


FAMILY = _stored(
    literal("Topi", "my:kids", "6"),
    resource("Topi", "my:wife", "Anna"),
    literal("Olli", "my:kids", "1"),
    resource("Olli", "my:wife", "Johanna"),
    literal("Olli", "my:title", "Keisari"),
)


# Expression building


def test_eq_builds_comparison():
    node = predicate.eq("my:kids")

    assert node == Comparison(term=predicate, op=CompareOp.EQ, operand="my:kids")


def test_eq_with_collection_builds_membership():
    node = subject.eq(["Topi", "Olli"])

    assert isinstance(node, MemberOf)
    assert node.source == frozenset({"Topi", "Olli"})
    assert not node.negated


def test_ne_with_collection_builds_negated_membership():
    node = subject.ne(("Topi",))

    assert isinstance(node, MemberOf)
    assert node.negated


def test_eq_with_subselect_keeps_it_lazy():
    nested = subselect(subject, predicate.eq("my:kids"))
    node = subject.eq(nested)

    assert isinstance(node, MemberOf)
    assert node.source is nested


def test_ordering_operator_rejects_collections():
    with pytest.raises(QueryError):
        as_int(object).gt([1, 2])


def test_comparing_against_expression_is_rejected():
    with pytest.raises(TypeError):
        subject.eq(predicate.eq("my:kids"))


def test_term_base_is_abstract():
    with pytest.raises(TypeError):
        Term()  # type: ignore[abstract]


def test_terms_compare_by_value_not_by_operator_overloading():
    assert subject == subject
    assert subject != predicate
    assert attribute("my:kids") == attribute("my:kids")
    assert as_int(object) == as_int(object)


def test_and_or_flatten_nested_nodes():
    a, b, c = subject.eq("a"), subject.eq("b"), subject.eq("c")

    assert and_(and_(a, b), c) == And((a, b, c))
    assert or_(a, or_(b, c)) == Or((a, b, c))
    assert not_(a) == Not(a)


def test_combinators_reject_non_expressions():
    with pytest.raises(TypeError):
        and_(subject.eq("a"), "b")  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        not_(subject)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        subselect("subject", everything)  # type: ignore[arg-type]


# Terms


def test_attribute_matches_predicate_and_object_on_same_statement():
    result = execute(FAMILY, statement_id, attribute("my:wife").eq("Anna"))

    assert result == [1]


def test_attribute_yields_no_value_for_other_predicates():
    # ne is false where the attribute has no value
    result = execute(FAMILY, statement_id, attribute("my:wife").ne(""))

    assert result == [1, 3]


def test_not_attribute_matches_other_predicates():
    result = execute(FAMILY, statement_id, not_(attribute("my:wife").eq("Anna")))

    assert result == [0, 2, 3, 4]


def test_resource_type_term():
    result = execute(FAMILY, object, resource_type.eq(ObjectKind.RESOURCE))

    assert result == ["Anna", "Johanna"]


def test_text_ordering_without_conversion_is_lexicographic():
    stored = _stored(literal("a", "n", "10"), literal("b", "n", "9"))

    assert execute(stored, subject, object.gt("5")) == ["b"]
    assert execute(stored, subject, as_int(object).gt(5)) == ["a", "b"]


def test_term_against_term_compares_same_statement():
    stored = _stored(literal("x", "x", "y"), literal("x", "p", "x"))

    assert execute(stored, statement_id, subject.eq(predicate)) == [0]
    assert execute(stored, statement_id, subject.eq(object)) == [1]


def test_reification_id_term():
    stored = _stored(literal("Topi", "my:title", "CTO"), literal(0, "my:evaluation", "true"))

    assert execute(stored, reification_id(subject), everything) == [-1, 0]


def test_converted_term_uses_callable():
    result = execute(FAMILY, converted(subject, str.upper), predicate.eq("my:kids"))

    assert result == ["TOPI", "OLLI"]


# Evaluation order and failures


def test_guard_before_conversion_limits_it_to_guarded_statements():
    result = execute(FAMILY, subject, and_(predicate.eq("my:kids"), as_int(object).gt(5)))

    assert result == ["Topi"]


def test_conversion_failure_fails_the_select():
    with pytest.raises(ConversionError) as exc_info:
        execute(FAMILY, subject, as_int(object).gt(5))

    assert exc_info.value.statement_id == 1
    assert exc_info.value.value == "Anna"
    assert exc_info.value.conversion == "as_int"


def test_conversion_failure_in_projection_fails_the_select():
    with pytest.raises(ConversionError):
        execute(FAMILY, as_int(object), everything)


def test_projection_without_value_raises():
    with pytest.raises(ProjectionError):
        execute(FAMILY, attribute("my:wife"), everything)


def test_incomparable_values_raise_query_error():
    with pytest.raises(QueryError):
        execute(FAMILY, subject, as_int(attribute("my:kids")).lt("2"))


def test_invalid_expression_raises_query_error():
    with pytest.raises(QueryError):
        execute(FAMILY, subject, "my:kids")  # type: ignore[arg-type]


def test_whole_statement_projection():
    result = execute(FAMILY, statements, subject.eq("Olli"))

    assert result == FAMILY[2:]


def test_empty_result_for_no_match():
    assert execute(FAMILY, subject, predicate.eq("my:dog")) == []


def test_distinct_keeps_first_occurrence():
    assert execute(FAMILY, subject, everything, distinct=True) == ["Topi", "Olli"]


# Subselects


def test_subselect_membership():
    kids_over_five = subselect(subject, and_(predicate.eq("my:kids"), as_int(object).gt(5)))
    result = execute(FAMILY, object, and_(predicate.eq("my:wife"), subject.eq(kids_over_five)))

    assert result == ["Anna"]


def test_subselect_is_evaluated_once_per_select():
    calls = []

    def track(value):
        calls.append(value)
        return value

    nested = subselect(converted(subject, track), predicate.eq("my:kids"))
    execute(FAMILY, object, subject.eq(nested))

    assert calls == ["Topi", "Olli"]


def test_shared_subselect_node_is_evaluated_once():
    calls = []

    def track(value):
        calls.append(value)
        return value

    nested = subselect(converted(subject, track), predicate.eq("my:kids"))
    execute(FAMILY, object, or_(subject.eq(nested), object.eq(nested)))

    assert calls == ["Topi", "Olli"]


def test_negated_subselect_membership():
    nested = subselect(subject, predicate.eq("my:title"))
    result = execute(FAMILY, subject, and_(predicate.eq("my:kids"), subject.ne(nested)))

    assert result == ["Topi"]


def test_materialized_list_membership():
    result = execute(FAMILY, statement_id, subject.eq(execute(FAMILY, subject, object.eq("Anna"))))

    assert result == [0, 1]


def test_subselect_is_plain_value_description():
    nested = subselect(subject, everything)

    assert nested == Subselect(projection=subject, expression=everything)


def test_subselect_with_unhashable_values_raises_query_error():
    nested = subselect(converted(subject, list), predicate.eq("my:kids"))

    with pytest.raises(QueryError):
        execute(FAMILY, object, subject.eq(nested))


def test_unhashable_term_value_in_membership_raises_query_error():
    with pytest.raises(QueryError) as exc_info:
        execute(FAMILY, subject, converted(subject, list).eq(["Topi"]))

    assert "statement 0" in str(exc_info.value)


# Boolean algebra (property tests)

SUBJECTS = ["a", "b", "c"]
PREDICATES = ["p", "q"]
OBJECTS = ["x", "y", "z"]


@st.composite
def statement_lists(draw):
    triples = draw(
        st.lists(
            st.tuples(
                st.sampled_from(SUBJECTS), st.sampled_from(PREDICATES), st.sampled_from(OBJECTS)
            ),
            max_size=12,
        )
    )
    return _stored(*(literal(s, p, o) for s, p, o in triples))


@st.composite
def atomic_expressions(draw):
    kind = draw(st.sampled_from(["subject", "predicate", "object", "attribute"]))
    if kind == "subject":
        return subject.eq(draw(st.sampled_from(SUBJECTS)))
    if kind == "predicate":
        return predicate.eq(draw(st.sampled_from(PREDICATES)))
    if kind == "object":
        return object.ne(draw(st.sampled_from(OBJECTS)))
    return attribute(draw(st.sampled_from(PREDICATES))).eq(draw(st.sampled_from(OBJECTS)))


@given(stored=statement_lists(), a=atomic_expressions(), b=atomic_expressions())
def test_or_is_order_preserving_union(stored, a, b):
    left = set(execute(stored, statement_id, a))
    right = set(execute(stored, statement_id, b))

    assert execute(stored, statement_id, or_(a, b)) == sorted(left | right)


@given(stored=statement_lists(), a=atomic_expressions(), b=atomic_expressions())
def test_and_is_intersection(stored, a, b):
    left = set(execute(stored, statement_id, a))
    right = set(execute(stored, statement_id, b))

    assert execute(stored, statement_id, and_(a, b)) == sorted(left & right)


@given(stored=statement_lists(), a=atomic_expressions())
def test_not_is_complement(stored, a):
    matched = set(execute(stored, statement_id, a))
    every_id = [s.id for s in stored]

    assert execute(stored, statement_id, not_(a)) == [i for i in every_id if i not in matched]


@given(stored=statement_lists(), name=st.sampled_from(PREDICATES), value=st.sampled_from(OBJECTS))
def test_attribute_equals_predicate_and_object(stored, name, value):
    shorthand = execute(stored, statement_id, attribute(name).eq(value))
    explicit = execute(stored, statement_id, and_(predicate.eq(name), object.eq(value)))

    assert shorthand == explicit
