"""Tests for dataprof.profiling.ind_profiler."""

import pytest

from dataprof.profiling.ind_profiler import IND, INDProfiler
from dataprof.relation import Relation


@pytest.fixture
def shop():
    customers = Relation("customers", ["id", "name"], [["1", "2", "3"], ["Ann", "Bob", "Cid"]])
    orders = Relation("orders", ["order_id", "customer"], [["10", "11", "12"], ["1", "1", "3"]])
    return customers, orders


def _pairs(inds):
    return {str(ind) for ind in inds}


class TestINDProfiler:
    def test_cross_relation(self, shop):
        inds = INDProfiler().profile(list(shop))
        assert "orders.customer ⊆ customers.id" in _pairs(inds)
        assert "customers.id ⊆ orders.customer" not in _pairs(inds)

    def test_within_relation(self):
        rel = Relation("r", ["a", "b"], [["1", "1"], ["1", "2"]])
        inds = INDProfiler().profile([rel])
        assert _pairs(inds) == {"r.a ⊆ r.b"}

    def test_column_not_compared_with_itself(self):
        rel = Relation("r", ["a"], [["x", "y"]])
        assert INDProfiler().profile([rel]) == []

    def test_equal_columns_both_directions(self):
        rel = Relation("r", ["a", "b"], [["x", "y"], ["y", "x"]])
        assert _pairs(INDProfiler().profile([rel])) == {"r.a ⊆ r.b", "r.b ⊆ r.a"}

    def test_nulls_are_values(self):
        rel = Relation("r", ["a", "b"], [["x", None], ["x", "y"]])
        assert _pairs(INDProfiler().profile([rel])) == set()

    def test_empty_column_included_everywhere(self):
        empty = Relation("e", ["nothing"], [[]])
        other = Relation("o", ["v"], [["1"]])
        inds = INDProfiler().profile([empty, other])
        assert _pairs(inds) == {"e.nothing ⊆ o.v"}

    def test_ind_fields(self, shop):
        customers, orders = shop
        ind = IND(orders, 1, customers, 0)
        assert ind.dependent_name == "customer"
        assert ind.referenced_name == "id"
        assert ind in INDProfiler().profile([customers, orders])

    def test_same_content_distinct_relations(self):
        a = Relation("t", ["v"], [["1"]])
        b = Relation("t", ["v"], [["1"]])
        assert len(INDProfiler().profile([a, b])) == 2

    def test_nary_unsupported(self, shop):
        with pytest.raises(NotImplementedError):
            INDProfiler().profile(list(shop), discover_nary=True)
