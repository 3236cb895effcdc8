import click

from pixelflip.cli import fail, main
from pixelflip.errors import PixelFlipError
from pixelflip.image import TrackedImage
from pixelflip.utils.io import normalise_format

FORMAT_CHOICE = click.Choice(["png", "jpeg", "jpg", "bmp"], case_sensitive=False)


def transform_file(ctx, input_path, output_path, format, operation, message):
    """
    Loads an image, runs one of the TrackedImage transforms on it, and saves
    it back out (over the input if no output path was given).
    """
    image = TrackedImage()
    try:
        image.load(input_path)
        if format:
            image.format = normalise_format(format)
        getattr(image, operation)()
        click.echo(message, err=True)
        image.save(output_path, quality=ctx.obj["jpeg_quality"])
    except (PixelFlipError, OSError) as error:
        fail(error)
    click.echo("Saved image: %s" % (output_path or input_path), err=True)


@main.command()
@click.option("--format", type=FORMAT_CHOICE, help="Force the output encoding")
@click.argument("input_path")
@click.argument("output_path", required=False)
@click.pass_context
def flipv(ctx, input_path, output_path, format):
    """
    Flips the image upside down
    """
    transform_file(
        ctx, input_path, output_path, format, "flip_vertical", "Image flipped up/down"
    )


@main.command()
@click.option("--format", type=FORMAT_CHOICE, help="Force the output encoding")
@click.argument("input_path")
@click.argument("output_path", required=False)
@click.pass_context
def fliph(ctx, input_path, output_path, format):
    """
    Flips the image left to right
    """
    transform_file(
        ctx,
        input_path,
        output_path,
        format,
        "flip_horizontal",
        "Image flipped left/right",
    )


@main.command()
@click.option("--format", type=FORMAT_CHOICE, help="Force the output encoding")
@click.argument("input_path")
@click.argument("output_path", required=False)
@click.pass_context
def mirror(ctx, input_path, output_path, format):
    """
    Rotates the image 180 degrees by flipping it both ways
    """
    transform_file(
        ctx, input_path, output_path, format, "mirror", "Image mirrored both ways"
    )
