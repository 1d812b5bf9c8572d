import pytest

from symbolic_calculus import (
    ConstantNode, UnaryOpNode, OpType,
    literal, variable, sin, cos, exp, add, multiply, divide,
    evaluate,
)
from symbolic_calculus.expression_tree.utils import (
    get_all_nodes, calculate_tree_depth, calculate_tree_size,
    find_nodes_by_type, find_nodes_by_operator,
    get_constants, get_variables, substitute,
)


@pytest.fixture
def sample(x, y):
    # ((x * 2) + sin(y))
    return add(multiply(x, literal(2.0)), sin(y))


class TestTraversal:
    def test_breadth_first(self, sample, x, y):
        nodes = get_all_nodes(sample)

        assert nodes[0] is sample
        assert nodes[1] is sample.left
        assert nodes[2] is sample.right
        assert nodes[3:] == [x, literal(2.0), y]

    def test_depth_first(self, sample, x, y):
        nodes = get_all_nodes(sample, 'depth_first')

        assert nodes == [sample, sample.left, x, literal(2.0), sample.right, y]

    def test_invalid_order(self, sample):
        with pytest.raises(ValueError):
            get_all_nodes(sample, 'sideways')


class TestMeasurements:
    def test_depth(self, sample, x):
        assert calculate_tree_depth(x) == 1
        assert calculate_tree_depth(sample) == 3
        assert calculate_tree_depth(sin(sin(sin(x)))) == 4

    def test_size_counts_shared_subtrees_per_reference(self, x):
        shared = exp(x)

        assert calculate_tree_size(add(shared, shared)) == 5

    def test_find_by_type_and_operator(self, sample):
        assert len(find_nodes_by_type(sample, ConstantNode)) == 1
        assert len(find_nodes_by_type(sample, UnaryOpNode)) == 1
        assert find_nodes_by_operator(sample, OpType.MUL) == [sample.left]
        assert find_nodes_by_operator(sample, OpType.COS) == []

    def test_constants_and_variables(self, sample):
        assert get_constants(sample) == [literal(2.0)]
        assert get_variables(sample) == ["x", "y"]
        assert get_variables(add(variable("b"), variable("a") * variable("b"))) == ["a", "b"]


class TestSubstitute:
    def test_numbers_become_constants(self, sample):
        bound = substitute(sample, {"x": 1.5, "y": 0.0})

        assert bound == add(multiply(literal(1.5), literal(2.0)), sin(literal(0.0)))
        assert evaluate(bound) == 3.0

    def test_node_replacement(self, x, y):
        result = substitute(sin(x), {"x": cos(y)})

        assert result == sin(cos(y))

    def test_untouched_subtrees_are_shared(self, sample):
        result = substitute(sample, {"x": 4.0})

        assert result.right is sample.right
        assert result.left is not sample.left

    def test_no_bindings_returns_same_tree(self, sample):
        assert substitute(sample, {}) is sample

    def test_input_unchanged(self, sample, x):
        substitute(sample, {"x": 4.0})

        assert sample.left.left is x

    def test_partial_binding_keeps_other_variables(self, x, y):
        result = substitute(divide(x, y), {"y": 2.0})

        assert get_variables(result) == ["x"]
