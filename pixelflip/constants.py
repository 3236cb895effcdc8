# Formats Pillow is allowed to decode, and the subset we can write back out
DECODABLE_FORMATS = ("PNG", "JPEG", "BMP")
ENCODABLE_FORMATS = ("PNG", "JPEG")
FORMAT_ALIASES = {"JPG": "JPEG"}

# Matches the Go image/jpeg default
JPEG_QUALITY = 75

# Resize factors at or below the minimum, or strictly inside the dead zone
# just above 1x, are rejected
RESIZE_MINIMUM = 0.10
RESIZE_DEAD_ZONE = (1.00, 1.01)

# Paths used by the fixed "run" sequence
RUN_INPUT_PATH = "ss.png"
RUN_OUTPUT_PATH = "ss_1.png"
