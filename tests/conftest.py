import numpy
import PIL.Image
import pytest


def make_image(width, height, mode="RGBA"):
    """
    Builds an image where every pixel is distinguishable from its neighbours:
    red follows x, green follows y, blue follows x + y.
    """
    ys, xs = numpy.mgrid[0:height, 0:width]
    arr = numpy.stack(
        [xs * 7 % 256, ys * 13 % 256, (xs + ys) % 256, numpy.full_like(xs, 255)],
        axis=-1,
    ).astype(numpy.uint8)
    image = PIL.Image.fromarray(arr)
    if mode == "P":
        image = image.convert("RGB").convert("P")
    elif mode != "RGBA":
        image = image.convert(mode)
    return image


def same_pixels(first, second):
    return (
        first.size == second.size
        and first.mode == second.mode
        and numpy.array_equal(numpy.asarray(first), numpy.asarray(second))
    )


@pytest.fixture
def png_path(tmp_path):
    """
    A 10x10 RGBA PNG on disk
    """
    path = tmp_path / "source.png"
    make_image(10, 10).save(path, format="PNG")
    return path


@pytest.fixture
def jpeg_path(tmp_path):
    path = tmp_path / "source.jpg"
    make_image(8, 6, "RGB").save(path, format="JPEG")
    return path
