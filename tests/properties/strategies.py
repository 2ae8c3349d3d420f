"""Hypothesis strategies for json-field-picker property-based testing."""

from hypothesis import strategies as st

from json_field_picker.tree.builder import MAX_SAFE_INTEGER

# JSON primitive strategy (numbers stay inside the exactly-representable range)
json_primitive_strategy = st.one_of(
    st.none(),
    st.booleans(),
    st.integers(min_value=-MAX_SAFE_INTEGER, max_value=MAX_SAFE_INTEGER),
    st.floats(allow_nan=False, allow_infinity=False),
    st.text(max_size=20),
)

# JSON value strategy (recursive, bounded size)
json_value_strategy = st.recursive(
    json_primitive_strategy,
    lambda children: st.one_of(
        st.lists(children, max_size=5),
        st.dictionaries(st.text(max_size=10), children, max_size=5),
    ),
    max_leaves=40,
)

# Path steps as they arrive from collaborators: keys, indices or decimal strings
path_step_strategy = st.one_of(
    st.text(max_size=8),
    st.integers(min_value=0, max_value=1000),
    st.integers(min_value=0, max_value=1000).map(str),
)

path_strategy = st.lists(path_step_strategy, max_size=6)

# Short structural paths over a tiny key alphabet, so toggles collide often
small_path_strategy = st.lists(
    st.one_of(st.sampled_from(["a", "b", "items"]), st.integers(min_value=0, max_value=2)),
    max_size=4,
)

raw_key_strategy = st.text(max_size=30)
