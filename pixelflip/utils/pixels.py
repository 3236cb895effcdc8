import PIL.Image

from pixelflip.errors import NoImageLoaded

VERTICAL = "vertical"
HORIZONTAL = "horizontal"
AXES = (VERTICAL, HORIZONTAL)


def get_pixels(image):
    """
    Turns an image into a grid of colour values indexed as grid[x][y]: a list
    of columns, each running top to bottom. Returns None if there's no image.
    """
    if image is None:
        return None
    width, height = image.size
    return [[image.getpixel((x, y)) for y in range(height)] for x in range(width)]


def blank_like(image):
    """
    Makes a new image with the same size, mode and palette as the one given.
    """
    blank = PIL.Image.new(image.mode, image.size)
    if image.mode in ("P", "PA"):
        blank.putpalette(image.getpalette())
    blank.info = dict(image.info)
    return blank


def flip(image, axis):
    """
    Returns a new image mirrored across the horizontal midline (VERTICAL) or
    the vertical midline (HORIZONTAL). The source image is only read from.

    Only the first half of each column (or row) is walked; every visited
    pixel writes both itself and its opposite from the source grid. An odd
    centre line gets written onto itself, and for even sizes the pair
    either side of the middle is written twice with the same values.
    """
    if image is None:
        raise NoImageLoaded()
    if axis not in AXES:
        raise ValueError("Unknown flip axis %r" % (axis,))
    width, height = image.size
    flipped = blank_like(image)
    pixels = get_pixels(image)
    for x, column in enumerate(pixels):
        for y, pixel in enumerate(column):
            if axis == VERTICAL:
                if y > height // 2:
                    continue
                inverse = height - y - 1
                flipped.putpixel((x, y), pixels[x][inverse])
                flipped.putpixel((x, inverse), pixel)
            else:
                if x > width // 2:
                    continue
                inverse = width - x - 1
                flipped.putpixel((x, y), pixels[inverse][y])
                flipped.putpixel((inverse, y), pixel)
    return flipped


def flip_vertical(image):
    return flip(image, VERTICAL)


def flip_horizontal(image):
    return flip(image, HORIZONTAL)


def mirror(image):
    """
    Flips an image both ways, i.e. rotates it 180 degrees.
    """
    return flip_horizontal(flip_vertical(image))
