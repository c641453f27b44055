from collections import Counter

import numpy as np
import pytest

from ninepatch.errors import DegenerateStretch
from ninepatch.services.index_mapping import build_mapping


def test_single_patch_takes_all_extra_pixels():
    assert build_mapping(3, 6, [1]).tolist() == [0, 1, 1, 1, 1, 2]


def test_zero_diff_is_identity_even_without_patches():
    assert build_mapping(0, 4, []).tolist() == [0, 1, 2, 3]
    assert build_mapping(0, 4, [2]).tolist() == [0, 1, 2, 3]


def test_remainder_goes_to_earliest_patches_in_list_order():
    # diff=5, k=3 -> base 2, первые 2 патча по списку получают 3
    mapping = build_mapping(5, 11, [4, 0, 2])
    counts = Counter(mapping.tolist())

    assert counts[4] == 3
    assert counts[0] == 3
    assert counts[2] == 2
    assert counts[1] == counts[3] == counts[5] == 1


@pytest.mark.parametrize("diff", [1, 2, 7, 13, 40])
def test_even_distribution_and_shape(diff):
    patches = [1, 3, 4, 8]
    source_dim = 10
    mapping = build_mapping(diff, source_dim + diff, patches)
    counts = Counter(mapping.tolist())
    base = diff // len(patches) + 1

    assert len(mapping) == source_dim + diff
    assert np.all(np.diff(mapping) >= 0)
    assert set(counts) == set(range(source_dim))
    larger = [p for p in patches if counts[p] == base + 1]
    assert larger == patches[: diff % len(patches)]
    assert all(counts[p] in (base, base + 1) for p in patches)
    assert all(counts[i] == 1 for i in range(source_dim) if i not in patches)


def test_empty_patches_with_stretch_raises():
    with pytest.raises(DegenerateStretch) as info:
        build_mapping(2, 5, [], axis="y")
    assert info.value.axis == "y"
    assert info.value.diff == 2


@pytest.mark.parametrize(
    "diff, target, patches",
    [
        (-1, 3, [0]),
        (5, 3, [0]),
        (1, 4, [3]),
        (1, 4, [-1]),
        (2, 5, [1, 1]),
    ],
)
def test_bad_arguments_raise_value_error(diff, target, patches):
    with pytest.raises(ValueError):
        build_mapping(diff, target, patches)
