import io

import PIL.Image

from pixelflip.constants import (
    DECODABLE_FORMATS,
    ENCODABLE_FORMATS,
    FORMAT_ALIASES,
    JPEG_QUALITY,
)
from pixelflip.errors import DecodeError, EncodeError, UnsupportedFormat

# Modes the JPEG encoder can write without conversion
JPEG_MODES = ("L", "RGB", "CMYK")
# Modes the PNG encoder can write without conversion
PNG_MODES = ("1", "L", "LA", "I", "I;16", "P", "RGB", "RGBA")


def read_file(input_path):
    """
    Reads a whole file into memory. "-" means stdin.
    """
    if input_path == "-":
        input_path = "/dev/stdin"
    with open(input_path, "rb") as fh:
        return fh.read()


def write_file(output_path, data):
    """
    Writes bytes out to a file, creating or truncating it. "-" means stdout.
    """
    if output_path == "-":
        output_path = "/dev/stdout"
    with open(output_path, "wb") as fh:
        fh.write(data)


def normalise_format(name):
    """
    Turns a user- or codec-supplied format name into the canonical
    upper-case Pillow name (png -> PNG, jpg -> JPEG).
    """
    if name is None:
        return None
    name = str(name).strip().upper()
    return FORMAT_ALIASES.get(name, name)


def decode_image(data):
    """
    Decodes image bytes into a fully-loaded Pillow image, returning it along
    with the detected format name.
    """
    try:
        image = PIL.Image.open(io.BytesIO(data), formats=DECODABLE_FORMATS)
        # Force the actual pixel decode now so truncated data fails here
        # rather than on first pixel access
        image.load()
    except (
        OSError,
        SyntaxError,
        ValueError,
        PIL.Image.DecompressionBombError,
    ) as exc:
        raise DecodeError("cannot decode image: %s" % exc) from exc
    return image, image.format


def encode_image(image, format, **options):
    """
    Encodes a Pillow image into bytes in the given format. Only formats in
    ENCODABLE_FORMATS are accepted.
    """
    format = normalise_format(format)
    if format not in ENCODABLE_FORMATS:
        raise UnsupportedFormat(format)
    if format == "JPEG":
        options.setdefault("quality", JPEG_QUALITY)
        # JPEG has no alpha or palette; drop them like Go's encoder does
        if image.mode not in JPEG_MODES:
            image = image.convert("RGB")
    else:
        options.pop("quality", None)
        # CMYK, YCbCr and friends come in from JPEG but PNG can't hold them
        if image.mode not in PNG_MODES:
            image = image.convert("RGBA" if "A" in image.getbands() else "RGB")
    buffer = io.BytesIO()
    try:
        image.save(buffer, format=format, **options)
    except (OSError, KeyError, ValueError) as exc:
        raise EncodeError("cannot encode image as %s: %s" % (format, exc)) from exc
    return buffer.getvalue()
