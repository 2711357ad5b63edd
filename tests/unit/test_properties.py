"""Property-based tests for the classifier, mask engine and diff engine."""

from hypothesis import given, strategies as st

from tfplanformat.actions import Action, ResultAction, classify
from tfplanformat.diff import diff_lines, render_diff
from tfplanformat.masking import mask
from tfplanformat.values import SENSITIVE, from_raw, same_value

json_scalars = (
    st.none()
    | st.booleans()
    | st.integers()
    | st.floats(allow_nan=False, allow_infinity=False)
    | st.text(max_size=8)
)
json_values = st.recursive(
    json_scalars,
    lambda children: st.lists(children, max_size=3)
    | st.dictionaries(st.text(max_size=5), children, max_size=3),
    max_leaves=12,
)
value_maps = st.dictionaries(st.text(max_size=5), json_values, max_size=5)

false_masks = st.recursive(
    st.none() | st.just(False),
    lambda children: st.lists(children, max_size=3)
    | st.dictionaries(st.text(max_size=5), children, max_size=3),
    max_leaves=8,
)


def _reverse_order(value):
    if isinstance(value, dict):
        return {key: _reverse_order(value[key]) for key in reversed(list(value))}
    if isinstance(value, list):
        return [_reverse_order(item) for item in value]
    return value


def _leaves(value):
    if isinstance(value, dict):
        for item in value.values():
            yield from _leaves(item)
    elif isinstance(value, list):
        for item in value:
            yield from _leaves(item)
    else:
        yield value


@given(st.lists(st.sampled_from(list(Action)), max_size=6))
def test_classify_ignores_order_and_duplicates(actions):
    assert classify(actions) == classify(list(reversed(actions)))
    assert classify(actions) == classify(set(actions))


@given(st.lists(st.sampled_from(list(Action)), max_size=6))
def test_classify_is_total(actions):
    assert isinstance(classify(actions), ResultAction)


@given(json_values)
def test_mask_without_sensitivity_preserves_value(value):
    assert same_value(mask(value, None), from_raw(value))
    assert same_value(mask(value, False), from_raw(value))


@given(json_values, false_masks)
def test_all_false_masks_preserve_value(value, sensitivity):
    assert same_value(mask(value, sensitivity), from_raw(value))


@given(json_values)
def test_true_mask_hides_every_non_null_leaf(value):
    masked = mask(value, True)
    for leaf in _leaves(masked):
        assert leaf is None or leaf is SENSITIVE


@given(value_maps)
def test_diff_absence_is_symmetric(values):
    assert render_diff(values, None) == render_diff(None, values)


@given(value_maps, value_maps)
def test_diff_is_independent_of_key_order(before, after):
    expected = render_diff(before, after)
    assert render_diff(_reverse_order(before), _reverse_order(after)) == expected
    assert render_diff(before, after) == expected


@given(value_maps)
def test_diff_of_equal_maps_is_the_listing(values):
    assert diff_lines(values, values) == diff_lines(values, None)


@given(value_maps)
def test_diff_of_equal_maps_hides_everything_when_unchanged_hidden(values):
    assert diff_lines(values, values, show_changed_values=False) == []
