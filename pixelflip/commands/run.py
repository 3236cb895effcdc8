import click

from pixelflip.cli import fail, main
from pixelflip.constants import RUN_INPUT_PATH, RUN_OUTPUT_PATH
from pixelflip.errors import PixelFlipError
from pixelflip.image import TrackedImage


@main.command()
@click.argument("input_path", default=RUN_INPUT_PATH)
@click.argument("output_path", default=RUN_OUTPUT_PATH)
@click.pass_context
def run(ctx, input_path, output_path):
    """
    Loads an image, reports on it, flips it vertically and saves it elsewhere.
    """
    image = TrackedImage()
    try:
        image.load(input_path)
        click.echo(f"Loaded image: {image.source_path}")
        # Format names are reported in lower case here (png, jpeg)
        click.echo(f"Format: {image.format.lower()}")
        click.echo(f"Resolution: {image.resolution}")
        click.echo(f"Mode: {image.mode}")
        image.flip_vertical()
        click.echo("Vertically flipped image successfully")
        image.save(output_path, quality=ctx.obj["jpeg_quality"])
        click.echo(f"Saved image: {output_path}")
    except (PixelFlipError, OSError) as error:
        fail(error)
    click.echo("All commands executed")
