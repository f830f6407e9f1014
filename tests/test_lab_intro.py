import pytest

from dslabs.lab_intro import (
    UBC_BLUE,
    UBC_YELLOW,
    colordist,
    create_spotlight,
    grayscale,
    main,
    ubcify,
    watermark,
)
from dslabs.png import Image, Pixel, load_png


def _filled(width, height, r, g, b, a=1.0):
    image = Image(width, height)
    for pixel in image:
        pixel.r, pixel.g, pixel.b, pixel.a = r, g, b, a
    return image


def test_grayscale_equalises_channels_and_keeps_input():
    image = _filled(3, 2, 200, 40, 90, 0.5)
    result = grayscale(image)
    for pixel in result:
        assert pixel.r == pixel.g == pixel.b
        assert pixel.a == 0.5
    assert image.get_pixel(0, 0).r == 200


def test_grayscale_pure_green():
    result = grayscale(_filled(1, 1, 0, 255, 0))
    assert result.get_pixel(0, 0).r == 149


def test_grayscale_black_stays_black():
    result = grayscale(_filled(2, 2, 0, 0, 0))
    assert all((p.r, p.g, p.b) == (0, 0, 0) for p in result)


def test_spotlight_center_unchanged_and_far_pixels_black():
    image = _filled(210, 5, 200, 100, 50)
    result = create_spotlight(image, 0, 0)
    center = result.get_pixel(0, 0)
    assert (center.r, center.g, center.b) == (200, 100, 50)
    far = result.get_pixel(205, 0)
    assert (far.r, far.g, far.b) == (0, 0, 0)


def test_spotlight_documented_example():
    image = _filled(10, 10, 200, 200, 200)
    result = create_spotlight(image, 1, 1)
    # 4 right and 3 down is 5 pixels away: 0.975 of the original value.
    assert result.get_pixel(5, 4).r == 195


def test_spotlight_decreases_with_distance():
    image = _filled(50, 1, 255, 255, 255)
    result = create_spotlight(image, 0, 0)
    values = [result.get_pixel(x, 0).r for x in range(50)]
    assert values == sorted(values, reverse=True)


def test_spotlight_center_outside_image():
    image = _filled(4, 4, 100, 100, 100)
    result = create_spotlight(image, -3, 0)
    assert result.get_pixel(0, 0).r < 100
    assert result.get_pixel(0, 0).r == result.get_pixel(0, 0).g


def test_ubcify_chooses_nearest_colour():
    image = Image(2, 1)
    yellowish = image.get_pixel(0, 0)
    yellowish.r, yellowish.g, yellowish.b = 250, 200, 20
    bluish = image.get_pixel(1, 0)
    bluish.r, bluish.g, bluish.b, bluish.a = 10, 30, 70, 0.75
    result = ubcify(image)
    first, second = result.get_pixel(0, 0), result.get_pixel(1, 0)
    assert (first.r, first.g, first.b) == (UBC_YELLOW.r, UBC_YELLOW.g, UBC_YELLOW.b)
    assert (second.r, second.g, second.b) == (UBC_BLUE.r, UBC_BLUE.g, UBC_BLUE.b)
    assert second.a == 0.75


def test_ubcify_only_produces_ubc_colours():
    image = Image(4, 4)
    for i, pixel in enumerate(image):
        pixel.r, pixel.g, pixel.b = (i * 17) % 256, (i * 53) % 256, (i * 91) % 256
    allowed = {(12, 35, 68), (247, 184, 0)}
    assert all((p.r, p.g, p.b) in allowed for p in ubcify(image))


def test_watermark_brightens_under_white():
    first = _filled(2, 1, 230, 10, 100)
    second = Image(2, 1)
    dark = second.get_pixel(1, 0)
    dark.r, dark.g, dark.b = 0, 0, 0
    result = watermark(first, second)
    assert (result.width, result.height) == (1024, 768)
    lit = result.get_pixel(0, 0)
    assert (lit.r, lit.g, lit.b) == (255, 50, 140)
    plain = result.get_pixel(1, 0)
    assert (plain.r, plain.g, plain.b) == (230, 10, 100)
    assert (first.width, first.height) == (2, 1)


def test_colordist_identical_is_zero():
    assert colordist(Pixel(12, 35, 68, 1.0), Pixel(12, 35, 68, 1.0)) == 0.0


def test_colordist_black_white():
    assert colordist(Pixel(0, 0, 0, 1.0), Pixel(255, 255, 255, 1.0)) == pytest.approx(3.0)


def test_colordist_symmetric():
    a, b = Pixel(10, 200, 30, 0.4), Pixel(90, 5, 250, 0.9)
    assert colordist(a, b) == pytest.approx(colordist(b, a))


def test_main_writes_outputs(tmp_path):
    _filled(8, 6, 120, 60, 30).save(tmp_path / "rose.png")
    _filled(4, 4, 255, 255, 255).save(tmp_path / "over.png")
    status = main(
        [
            "--input", str(tmp_path / "rose.png"),
            "--overlay", str(tmp_path / "over.png"),
            "--output-dir", str(tmp_path),
        ]
    )
    assert status == 0
    assert load_png(tmp_path / "out-grayscale.png").width == 8
    assert load_png(tmp_path / "out-spotlight.png").height == 6
    assert load_png(tmp_path / "out-ubcify.png").width == 8
    marked = load_png(tmp_path / "out-watermark.png")
    assert (marked.width, marked.height) == (1024, 768)
    assert marked.get_pixel(0, 0).r == 160


def test_main_missing_input_fails(tmp_path):
    status = main(["--input", str(tmp_path / "none.png"), "--output-dir", str(tmp_path)])
    assert status == 1