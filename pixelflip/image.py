from pixelflip.constants import ENCODABLE_FORMATS, RESIZE_DEAD_ZONE, RESIZE_MINIMUM
from pixelflip.errors import InvalidModifier, NoImageLoaded, UnsupportedFormat
from pixelflip.utils import pixels
from pixelflip.utils.io import (
    decode_image,
    encode_image,
    normalise_format,
    read_file,
    write_file,
)


class TrackedImage:
    """
    An image loaded from disk, along with where it came from and what format
    it was in. Transforms swap in a brand new image rather than editing the
    held one.
    """

    def __init__(self):
        self.source_path = None
        self.format = None
        self.image = None

    @property
    def loaded(self):
        return self.image is not None

    @property
    def width(self):
        return self.image.size[0] if self.loaded else None

    @property
    def height(self):
        return self.image.size[1] if self.loaded else None

    @property
    def mode(self):
        return self.image.mode if self.loaded else None

    @property
    def resolution(self):
        if not self.loaded:
            return None
        return "%dx%d" % (self.width, self.height)

    def load(self, path):
        """
        Reads and decodes the image at path. Nothing is changed on this object
        unless both steps succeed.
        """
        image, format = decode_image(read_file(path))
        self.source_path, self.format, self.image = path, format, image

    def save(self, path=None, **options):
        """
        Encodes the image in its current format and writes it to path, or
        back to where it was loaded from if no path is given.
        """
        if path is None:
            path = self.source_path
        if not self.loaded:
            raise NoImageLoaded()
        format = normalise_format(self.format)
        if format not in ENCODABLE_FORMATS:
            raise UnsupportedFormat(self.format)
        # Encode fully before opening the target so a failure can't truncate it
        data = encode_image(self.image, format, **options)
        write_file(path, data)

    def flip_vertical(self):
        self.image = pixels.flip_vertical(self.image)

    def flip_horizontal(self):
        self.image = pixels.flip_horizontal(self.image)

    def mirror(self):
        """
        Flips the image both ways (rotate 180deg)
        """
        self.image = pixels.mirror(self.image)

    def resize(self, factor):
        """
        Checks a resize factor. Factors of 0.1x and below, and those just
        over 1x, are refused; actual resampling is not done.
        """
        if factor <= RESIZE_MINIMUM or (
            RESIZE_DEAD_ZONE[0] < factor < RESIZE_DEAD_ZONE[1]
        ):
            raise InvalidModifier(factor)

    def describe(self):
        """
        Returns (label, value) pairs describing the loaded image
        """
        return [
            ("Format", self.format),
            ("Resolution", self.resolution),
            ("Mode", self.mode),
        ]
