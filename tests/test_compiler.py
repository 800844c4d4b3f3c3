import pytest
from maxsat.core.types import Constraint, Soft, var, hard_clause, weighted_clause, hard_pb, weighted_pb, at_least
from maxsat.vars import VarRegistry
from maxsat.compilation.compiler import attach_blocking_literal, compile_constraints
from maxsat.compilation.naming import blocking_name, domain_name, parse_name

def compile_all(constraints):
    registry = VarRegistry()
    return compile_constraints(constraints, registry), registry

def test_naming_roundtrip():
    assert parse_name(domain_name("x")) == ("var", "x")
    assert parse_name(blocking_name(12)) == ("block", 12)
    assert parse_name(domain_name("BLOCK_1")) == ("var", "BLOCK_1")
    assert parse_name("aux_3") is None
    assert parse_name("BLOCK_x") is None

def test_hard_clause_polarity():
    a, b = var("a"), var("b")
    art, reg = compile_all([hard_clause(a, b.negation())])
    pbc = art.constraints[0]
    assert pbc.lits == [1, -2]
    assert pbc.coeffs is None
    assert pbc.at_least == 1
    assert reg.names() == ["VAR_a", "VAR_b"]
    assert art.block_weights == {}
    assert art.max_weight == 0

def test_variables_registered_in_first_reference_order():
    a, b, c = var("a"), var("b"), var("c")
    art, reg = compile_all([hard_clause(b, a), hard_clause(c, b.negation())])
    assert reg.names() == ["VAR_b", "VAR_a", "VAR_c"]
    assert art.constraints[1].lits == [3, -1]
    assert art.num_vars == 3

def test_soft_clause_gets_blocking_literal():
    a, b = var("a"), var("b")
    art, reg = compile_all([hard_clause(a, b), weighted_clause([a.negation()], 5)])
    pbc = art.constraints[1]
    bl = reg.index_of("BLOCK_1")
    assert pbc.lits == [-1, bl]
    assert pbc.coeffs is None
    assert art.block_weights == {bl: 5}
    assert art.block_to_constraint == {bl: 1}
    assert art.max_weight == 5
    assert art.flagged_constraints == []

def test_soft_pb_blocking_coefficient_is_threshold():
    a, b = var("a"), var("b")
    art, reg = compile_all([weighted_pb([a, b], [2, 3], 4, 7)])
    pbc = art.constraints[0]
    assert pbc.lits == [1, 2, 3]
    assert pbc.coeffs == [2, 3, 4]
    assert pbc.at_least == 4
    assert reg.name_of(3) == "BLOCK_0"

def test_coefficients_are_copied():
    coeffs = [2, 3]
    c = hard_pb([var("a"), var("b")], coeffs, 3)
    art, _ = compile_all([c])
    art.constraints[0].coeffs.append(99)
    assert c.coefficients == [2, 3]

def test_zero_weight_soft_creates_no_blocking_variable():
    c = Constraint(literals=[var("a"), var("b")], strength=Soft(weight=0))
    art, reg = compile_all([c])
    assert not any(n.startswith("BLOCK_") for n in reg.names())
    assert art.constraints[0].lits == [1, 2]
    assert art.block_weights == {}
    assert art.stats["num_soft"] == 0
    assert art.stats["num_hard"] == 1

def test_total_weight_is_sum_of_soft_weights():
    a = var("a")
    cs = [weighted_clause([a], 2), hard_clause(a), weighted_clause([a.negation()], 3), weighted_clause([a], 10)]
    art, reg = compile_all(cs)
    assert art.max_weight == 15
    assert sum(art.block_weights.values()) == art.max_weight
    assert sorted(art.block_to_constraint.values()) == [0, 2, 3]
    for bl, cid in art.block_to_constraint.items():
        assert reg.name_of(bl) == blocking_name(cid)

def test_attach_blocking_literal_with_coefficients():
    lits, coeffs, disables = attach_blocking_literal([1, -2], [3, 1], 3, 5)
    assert lits == [1, -2, 5]
    assert coeffs == [3, 1, 3]
    assert disables

def test_attach_blocking_literal_clause():
    lits, coeffs, disables = attach_blocking_literal([1, 2], None, 1, 3)
    assert lits == [1, 2, 3]
    assert coeffs is None
    assert disables

@pytest.mark.parametrize("coeffs, k", [([-2, 1], 0), ([1, -1], 1), ([3, -1, 2], 4)])
def test_attach_blocking_literal_negative_coefficients_cannot_disable(coeffs, k):
    lits, new_coeffs, disables = attach_blocking_literal([1, 2, 3][:len(coeffs)], coeffs, k, 9)
    assert new_coeffs == coeffs + [k]
    assert not disables

def test_attach_blocking_literal_non_positive_threshold():
    _, coeffs, disables = attach_blocking_literal([1, 2], [1, 2], 0, 3)
    assert coeffs == [1, 2, 0]
    assert disables

@pytest.mark.parametrize("k", [0, 2, 3])
def test_attach_blocking_literal_cardinality_cannot_disable(k):
    lits, coeffs, disables = attach_blocking_literal([1, 2, 3], None, k, 4)
    assert lits == [1, 2, 3, 4]
    assert coeffs is None
    assert not disables

def test_soft_cardinality_is_flagged():
    a, b, c = var("a"), var("b"), var("c")
    art, _ = compile_all([hard_clause(a), at_least([a, b, c], 2, weight=3)])
    assert art.flagged_constraints == [1]
    # Encoding is kept as is: the blocking literal counts 1 towards at_least
    assert art.constraints[1].lits == [1, 2, 3, 4]
    assert art.constraints[1].coeffs is None
    assert art.constraints[1].at_least == 2

def test_soft_pb_with_negative_coefficient_is_flagged():
    a, b = var("a"), var("b")
    art, _ = compile_all([hard_clause(a), weighted_pb([a, b], [-2, 1], 0, 4), weighted_pb([a, b], [2, 1], 2, 1)])
    assert art.flagged_constraints == [1]
    assert art.constraints[1].coeffs == [-2, 1, 0]

def test_hard_cardinality_is_not_flagged():
    a, b, c = var("a"), var("b"), var("c")
    art, _ = compile_all([at_least([a, b, c], 2)])
    assert art.flagged_constraints == []
