import pytest
from stack_safe.examples import ackermann, binomial, expr, linked, tarjan


def test_ackermann_implementations_agree():
    for m in range(4):
        for n in range(5):
            expected = ackermann.recursive(m, n)
            for name, implementation in ackermann.IMPLEMENTATIONS.items():
                assert implementation(m, n) == expected, (name, m, n)


def test_ackermann_known_values():
    assert ackermann.loop(3, 5) == 253
    assert ackermann.yielding(3, 5) == 253
    assert ackermann.yielding_tco(3, 5) == 253
    assert ackermann.manual(3, 5) == 253
    assert ackermann.manual_tco(3, 5) == 253


def test_ackermann_beyond_the_recursion_limit():
    with pytest.raises(RecursionError):
        ackermann.recursive(1, 5000)
    assert ackermann.manual_tco(1, 5000) == 5002
    assert ackermann.yielding(1, 5000) == 5002


def test_binomial():
    assert binomial.binomial_safe(10, 3) == 120
    for n in range(12):
        for k in range(n + 1):
            assert binomial.binomial_safe(n, k) == binomial.binomial(n, k)


def test_expression_evaluation():
    e = expr.product(expr.Num(2), expr.Num(3),
                     expr.Add([expr.Num(1), expr.Num(4)]))
    assert expr.evaluate(e) == expr.evaluate_recursive(e) == 30
    assert expr.evaluate(expr.Add([])) == 0


def test_deep_expression():
    e = expr.nested_sum(10000)
    assert expr.evaluate(e) == 10000
    with pytest.raises(RecursionError):
        expr.evaluate_recursive(e)


def test_expression_errors_are_the_same():
    bad = expr.Add([expr.Num(1), expr.Mul(expr.Num(2), 'x')])
    with pytest.raises(TypeError) as direct:
        expr.evaluate_recursive(bad)
    with pytest.raises(TypeError) as safe:
        expr.evaluate(bad)
    assert str(direct.value) == str(safe.value)


def test_nested_sum_rejects_empty():
    with pytest.raises(ValueError):
        expr.nested_sum(0)


def test_tarjan_small():
    graph = [[1], [2, 3], [1, 4], [2], []]
    assert tarjan.strongly_connected_components(graph) == [[4], [3, 2, 1],
                                                           [0]]


def test_tarjan_long_chain():
    n = 10000
    components = tarjan.strongly_connected_components(tarjan.chain(n))
    components.reverse()
    assert components == [[i] for i in range(n)]


def test_tarjan_empty_graph():
    assert tarjan.chain(0) == []
    assert tarjan.strongly_connected_components([]) == []


def test_linked_list_length():
    assert linked.length_safe(None) == 0
    assert linked.length_safe(linked.from_range(3)) == linked.length(
        linked.from_range(3)) == 3
    xs = linked.from_range(10000)
    assert linked.length_safe(xs) == 10000
    with pytest.raises(RecursionError):
        linked.length(xs)
