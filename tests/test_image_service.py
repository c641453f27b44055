import numpy as np
import pytest
from PIL import Image

from conftest import make_nine_patch, numbered_interior
from ninepatch.services.image_service import ImageService
from ninepatch.services.nine_patch import NinePatch


def test_load_image_converts_to_rgba(tmp_path):
    path = tmp_path / "button.9.png"
    Image.new("RGB", (7, 5), color=(10, 20, 30)).save(path)

    data = ImageService().load_image(path)

    assert data.path == path
    assert data.mode == "RGBA"
    assert (data.width, data.height) == (7, 5)
    assert data.interior_size == (5, 3)
    assert data.pixels.shape == (5, 7, 4)
    assert data.pixels.dtype == np.uint8
    assert tuple(data.pixels[2, 3]) == (10, 20, 30, 255)
    assert data.size_bytes == path.stat().st_size


def test_load_image_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        ImageService().load_image(tmp_path / "missing.png")


def test_load_image_rejects_non_image(tmp_path):
    path = tmp_path / "notes.png"
    path.write_text("not an image")

    with pytest.raises(ValueError):
        ImageService().load_image(path)


def test_saved_nine_patch_keeps_markers(tmp_path):
    service = ImageService()
    pixels = make_nine_patch(numbered_interior(4, 3), top=[1, 2], left=[0])

    saved = service.save_image(pixels, tmp_path / "out" / "panel.9.png")
    loaded = service.load_image(saved)

    assert np.array_equal(loaded.pixels, pixels)
    assert NinePatch(loaded.pixels).patches.top == (1, 2)


def test_to_pil_accepts_read_only_arrays(small_nine_patch):
    rendered = NinePatch(small_nine_patch).size_of(8, 4)

    image = ImageService().to_pil(rendered)

    assert image.mode == "RGBA"
    assert image.size == (8, 4)


def test_sample_is_a_stretchable_nine_patch():
    sample = ImageService().make_sample(size=24, corner=6)
    nine_patch = NinePatch(sample.pixels)

    assert sample.path is None
    assert sample.interior_size == (24, 24)
    assert nine_patch.top_patches == (12,)
    assert nine_patch.left_patches == (12,)
    out = nine_patch.size_of(200, 40)
    assert out.shape == (40, 200, 4)
    # углы не искажаются
    assert np.array_equal(out[:6, :6], nine_patch.original_image[:6, :6])


def test_sample_rejects_too_small_size():
    with pytest.raises(ValueError):
        ImageService().make_sample(size=8, corner=6)
