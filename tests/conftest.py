"""Shared fixtures — sample trees in bracket notation."""

import pytest

from lingtree.tree.layout import layout_tree
from lingtree.tree.parser import parse_tree

WH_QUESTION = "[CP [DP#wh what] [C' [C did] [TP [DP you] [VP [V see] t#wh]]]]"


@pytest.fixture
def wh_source() -> str:
    return WH_QUESTION


@pytest.fixture
def wh_tree():
    """Laid-out wh-question with one movement pair."""
    return layout_tree(parse_tree(WH_QUESTION))


@pytest.fixture
def dp_tree():
    return layout_tree(parse_tree("[DP [D the] [NP dog]]"))
