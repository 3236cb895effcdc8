import click

from pixelflip.cli import fail, main
from pixelflip.errors import PixelFlipError
from pixelflip.image import TrackedImage


@main.command()
@click.argument("factor", type=float)
@click.argument("input_path")
@click.argument("output_path", required=False)
@click.pass_context
def resize(ctx, factor, input_path, output_path):
    """
    Checks a resize factor and re-saves the image. Resampling itself is not
    done yet, so the pixels come out unchanged.
    """
    image = TrackedImage()
    try:
        image.load(input_path)
        image.resize(factor)
        click.echo("Resize factor %sx accepted" % factor, err=True)
        image.save(output_path, quality=ctx.obj["jpeg_quality"])
    except (PixelFlipError, OSError) as error:
        fail(error)
