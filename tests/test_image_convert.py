import pytest
from PIL import Image

from cutetools.image_convert import convert_image, supported_formats


@pytest.fixture
def png_file(tmp_path):
    path = tmp_path / "pic.png"
    image = Image.new("RGB", (4, 3), (10, 20, 30))
    image.putpixel((1, 1), (200, 100, 50))
    image.save(path)
    return path


def test_supported_formats_sorted_lowercase():
    formats = supported_formats()
    assert formats == sorted(formats)
    assert all(name == name.lower() for name in formats)
    assert "png" in formats


def test_convert_png_to_bmp_keeps_pixels(png_file, tmp_path):
    target = tmp_path / "pic.bmp"
    assert convert_image(png_file, target, "bmp") == str(target)
    with Image.open(target) as result:
        assert result.format == "BMP"
        assert result.size == (4, 3)
        assert result.convert("RGB").getpixel((1, 1)) == (200, 100, 50)


def test_extension_alias_is_accepted(png_file, tmp_path):
    target = tmp_path / "pic.jpg"
    convert_image(png_file, target, "jpg")
    with Image.open(target) as result:
        assert result.format == "JPEG"


def test_rgba_to_jpeg_is_converted(tmp_path):
    source = tmp_path / "alpha.png"
    Image.new("RGBA", (2, 2), (1, 2, 3, 128)).save(source)
    target = tmp_path / "alpha.jpeg"
    convert_image(source, target, "jpeg")
    with Image.open(target) as result:
        assert result.mode == "RGB"
        assert result.size == (2, 2)


def test_unknown_format_raises(png_file, tmp_path):
    with pytest.raises(ValueError):
        convert_image(png_file, tmp_path / "x.zzz", "zzz")


def test_missing_source_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        convert_image(tmp_path / "none.png", tmp_path / "out.bmp", "bmp")


def test_non_image_source_raises(tmp_path):
    source = tmp_path / "text.png"
    source.write_text("not an image")
    with pytest.raises(OSError):
        convert_image(source, tmp_path / "out.bmp", "bmp")