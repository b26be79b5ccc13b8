"""Constants for markasset."""

DEFAULT_CONFIG_FILE = "markasset.yaml"

# Alias for the project's asset directory: ~/assets/foo.png -> <root>/src/assets/foo.png
ALIAS_PREFIX = "~/assets/"
ALIAS_TARGET = ("src", "assets")

# Asset naming (Rollup/Vite compatible)
DEFAULT_ASSET_FILE_NAMES = "assets/[name]-[hash][extname]"
DEFAULT_HASH_SIZE = 8
HASH_ALGORITHM = "sha256"
ASSET_TYPE = "asset"

# Image service; an empty base keeps asset sources relative
DEFAULT_IMAGE_BASE = ""

# Key under which a document carries its candidate image references
IMAGE_PATHS_KEY = "image_paths"

# EXIF orientation tag; values 5-8 rotate the image by 90 degrees
EXIF_ORIENTATION_TAG = 0x0112
ROTATED_ORIENTATIONS = {5, 6, 7, 8}
