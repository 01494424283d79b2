"""Hypothesis strategies for property-based testing of resultant types."""

from hypothesis import strategies as st

# Basic value strategies
integers = st.integers()
texts = st.text(min_size=0, max_size=100)
booleans = st.booleans()

# Values that survive a JSON round trip unchanged
json_scalars = st.one_of(
    st.none(),
    booleans,
    st.integers(min_value=-(2**63), max_value=2**63 - 1),
    texts,
)
json_values = st.recursive(
    json_scalars,
    lambda children: st.one_of(
        st.lists(children, max_size=5),
        st.dictionaries(texts, children, max_size=5),
    ),
    max_leaves=10,
)

# Exception strategies
exceptions = st.sampled_from(
    [
        ValueError("test"),
        TypeError("test"),
        RuntimeError("test"),
    ]
)

# Functions for the functor and monad laws
int_functions = st.sampled_from(
    [
        lambda x: x + 1,
        lambda x: x * 2,
        lambda x: -x,
        lambda x: x % 7,
    ]
)
