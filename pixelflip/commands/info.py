import click
import numpy

from pixelflip.cli import fail, main
from pixelflip.errors import PixelFlipError
from pixelflip.image import TrackedImage


@main.command()
@click.argument("input_paths", nargs=-1)
def info(input_paths):
    """
    Gives details on one or more images
    """
    for input_path in input_paths:
        click.echo(click.style(f"{input_path}", fg="blue", bold=True))
        image = TrackedImage()
        try:
            image.load(input_path)
        except (PixelFlipError, OSError) as error:
            fail(error)
        for label, value in image.describe():
            click.echo(f"{label}: {value}")
        for band, (min_value, max_value) in channel_ranges(image.image):
            click.echo(f"{band} range: {min_value} to {max_value}")


def channel_ranges(image):
    """
    Returns (band name, (min, max)) for each band of an image.
    """
    # Mode "1" comes out as booleans
    arr = numpy.asarray(image).astype(int)
    bands = image.getbands()
    if arr.ndim == 2:
        arr = arr[:, :, numpy.newaxis]
    return [
        (band, (arr[:, :, i].min().item(), arr[:, :, i].max().item()))
        for i, band in enumerate(bands)
    ]
