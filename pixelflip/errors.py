class PixelFlipError(Exception):
    """
    Base class for errors raised by pixelflip itself. I/O failures are left
    as the builtin OSError family.
    """


class NoImageLoaded(PixelFlipError):
    def __init__(self, message="no image data, you must load the image first"):
        super().__init__(message)


class UnsupportedFormat(PixelFlipError, ValueError):
    def __init__(self, format):
        self.format = format
        super().__init__("unsupported format: %s" % format)


class InvalidModifier(PixelFlipError, ValueError):
    def __init__(self, factor):
        self.factor = factor
        super().__init__("unsupported image resize modifier: %s" % factor)


class DecodeError(PixelFlipError):
    pass


class EncodeError(PixelFlipError):
    pass
