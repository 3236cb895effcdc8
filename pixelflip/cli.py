import sys

import click

from pixelflip.constants import JPEG_QUALITY


@click.group()
@click.option(
    "--jpeg-quality",
    default=JPEG_QUALITY,
    type=click.IntRange(1, 95),
    help="Quality used when writing JPEG files",
)
@click.pass_context
def main(ctx, jpeg_quality):
    """
    Top-level command entrypoint
    """
    ctx.ensure_object(dict)
    ctx.obj["jpeg_quality"] = jpeg_quality


def fail(error):
    """
    Reports an error and stops the process.
    """
    click.echo(click.style("Error: %s" % error, fg="red", bold=True), err=True)
    sys.exit(1)


# Import all sub-commands
import pixelflip.commands.flip
import pixelflip.commands.info
import pixelflip.commands.resize
import pixelflip.commands.run


if __name__ == "__main__":
    main()
