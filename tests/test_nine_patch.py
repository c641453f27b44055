import numpy as np
import pytest

from conftest import make_nine_patch, numbered_interior
from ninepatch.errors import DegenerateStretch, InvalidImage, OutOfMemory
from ninepatch.services.nine_patch import NinePatch
from ninepatch.services.patch_detector import PatchDetector


class CountingDetector(PatchDetector):
    def __init__(self) -> None:
        self.calls = 0

    def detect(self, pixels):
        self.calls += 1
        return super().detect(pixels)


def test_reference_example(small_nine_patch):
    nine_patch = NinePatch(small_nine_patch)
    interior = nine_patch.original_image

    out = nine_patch.size_of(6, 3)

    assert out.shape == (3, 6, 4)
    assert np.array_equal(out[:, 0], interior[:, 0])
    assert np.array_equal(out[:, 5], interior[:, 2])
    for x in range(1, 5):
        assert np.array_equal(out[:, x], interior[:, 1])


def test_interior_and_patch_accessors():
    pixels = make_nine_patch(numbered_interior(5, 4), top=[2], left=[1, 3], bottom=[0], right=[2])
    nine_patch = NinePatch(pixels)

    assert nine_patch.interior_size == (5, 4)
    assert nine_patch.top_patches == (2,)
    assert nine_patch.left_patches == (1, 3)
    assert nine_patch.bottom_patches == (0,)
    assert nine_patch.right_patches == (2,)
    assert np.array_equal(nine_patch.original_image, pixels[1:-1, 1:-1])


def test_identity_returns_interior_without_caching(small_nine_patch):
    nine_patch = NinePatch(small_nine_patch)

    out = nine_patch.size_of(3, 3)

    assert np.array_equal(out, nine_patch.original_image)
    assert len(nine_patch) == 0


def test_smaller_requests_are_clamped(small_nine_patch):
    nine_patch = NinePatch(small_nine_patch)

    assert np.array_equal(nine_patch.size_of(1, 5), nine_patch.size_of(3, 5))
    assert np.array_equal(nine_patch.size_of(0, 0), nine_patch.original_image)


def test_cache_is_keyed_by_requested_size(small_nine_patch):
    nine_patch = NinePatch(small_nine_patch)

    first = nine_patch.size_of(1, 5)
    again = nine_patch.size_of(1, 5)

    assert again is first
    assert nine_patch.cached_sizes == [(1, 5)]


def test_clear_cache_recomputes_without_redetecting(small_nine_patch):
    detector = CountingDetector()
    nine_patch = NinePatch(small_nine_patch, detector=detector)

    before = nine_patch.size_of(8, 8)
    nine_patch.clear_cache()
    after = nine_patch.size_of(8, 8)

    assert len(nine_patch) == 1
    assert after is not before
    assert np.array_equal(after, before)
    assert detector.calls == 1


def test_results_are_read_only(small_nine_patch):
    nine_patch = NinePatch(small_nine_patch)

    with pytest.raises(ValueError):
        nine_patch.size_of(7, 7)[0, 0, 0] = 1
    with pytest.raises(ValueError):
        nine_patch.size_of(3, 3)[0, 0, 0] = 1


def test_original_image_is_an_independent_copy(small_nine_patch):
    nine_patch = NinePatch(small_nine_patch)

    copy = nine_patch.original_image
    copy[:] = 0

    assert not np.array_equal(nine_patch.original_image, copy)
    assert nine_patch.original_image is not nine_patch.original_image


def test_source_buffer_changes_do_not_leak(small_nine_patch):
    nine_patch = NinePatch(small_nine_patch)
    expected = nine_patch.size_of(6, 6).copy()

    small_nine_patch[:] = 7
    nine_patch.clear_cache()

    assert np.array_equal(nine_patch.size_of(6, 6), expected)


def test_fixed_rows_and_columns_are_preserved():
    interior = numbered_interior(6, 5)
    nine_patch = NinePatch(make_nine_patch(interior, top=[2, 3], left=[2]))

    out = nine_patch.size_of(17, 12)

    # колонки 0, 1, 4, 5 и строки 0, 1, 3, 4 не растягиваются
    assert np.array_equal(out[:2, :2], interior[:2, :2])
    assert np.array_equal(out[-2:, -2:], interior[-2:, -2:])
    assert np.array_equal(out[:2, -2:], interior[:2, -2:])
    assert np.array_equal(out[-2:, :2], interior[-2:, :2])


def test_every_output_pixel_is_a_source_pixel():
    interior = numbered_interior(4, 4)
    nine_patch = NinePatch(make_nine_patch(interior, top=[1, 2], left=[0, 3]))

    out = nine_patch.size_of(11, 9)

    # R хранит x, G хранит y: каждый пиксель результата есть в исходнике
    xs = out[..., 0].astype(int)
    ys = out[..., 1].astype(int)
    assert np.array_equal(out, interior[ys, xs])
    assert np.all(np.diff(xs, axis=1) >= 0)
    assert np.all(np.diff(ys, axis=0) >= 0)


def test_bottom_and_right_markers_do_not_change_output():
    interior = numbered_interior(4, 4)
    plain = NinePatch(make_nine_patch(interior, top=[1], left=[1]))
    extra = NinePatch(make_nine_patch(interior, top=[1], left=[1], bottom=[3], right=[0, 2]))

    assert np.array_equal(plain.size_of(9, 7), extra.size_of(9, 7))


def test_degenerate_stretch_is_reported_and_not_cached():
    nine_patch = NinePatch(make_nine_patch(numbered_interior(3, 3), left=[1]))

    with pytest.raises(DegenerateStretch) as info:
        nine_patch.size_of(5, 3)

    assert info.value.axis == "x"
    assert len(nine_patch) == 0
    # по вертикали патч есть, а ширина не растёт: рендер возможен
    assert nine_patch.size_of(3, 6).shape == (6, 3, 4)


def test_out_of_memory_is_wrapped(monkeypatch, small_nine_patch):
    nine_patch = NinePatch(small_nine_patch)

    def fail(*_args):
        raise MemoryError

    monkeypatch.setattr(np, "ix_", fail)

    with pytest.raises(OutOfMemory):
        nine_patch.size_of(10, 10)
    assert len(nine_patch) == 0


def test_invalid_source_is_rejected():
    with pytest.raises(InvalidImage):
        NinePatch(np.zeros((1, 1, 4), dtype=np.uint8))


def test_instances_keep_separate_caches(small_nine_patch):
    a = NinePatch(small_nine_patch)
    b = NinePatch(small_nine_patch)

    a.size_of(5, 5)

    assert len(a) == 1
    assert len(b) == 0


def test_out_of_memory_while_building_mapping_is_wrapped(monkeypatch, small_nine_patch):
    nine_patch = NinePatch(small_nine_patch)

    def fail(*_args, **_kwargs):
        raise MemoryError

    monkeypatch.setattr(np, "repeat", fail)

    with pytest.raises(OutOfMemory):
        nine_patch.size_of(10, 10)
    assert len(nine_patch) == 0
