import io
import logging
from functools import lru_cache

from PIL import Image, ImageDraw, ImageFont

from services.errors import InvalidInput

logger = logging.getLogger(__name__)

BACKGROUND = "#007bff"
FOREGROUND = "#fff"
# Font size does not follow the image size
FONT_SIZE = 48
DEFAULT_FONT = "DejaVuSans-Bold.ttf"


@lru_cache(maxsize=8)
def _load_font(font_path: str) -> ImageFont.ImageFont:
    try:
        return ImageFont.truetype(font_path, FONT_SIZE)
    except OSError:
        logger.warning("Avatar font %r not found, using Pillow's default font", font_path)
        return ImageFont.load_default(size=FONT_SIZE)


@lru_cache(maxsize=256)
def render_avatar(letter: str, width: int = 100, height: int = 100, font_path: str = DEFAULT_FONT) -> bytes:
    """
    Render a square-ish avatar showing one upper-cased letter

    Args:
        letter: The single character to draw
        width: Image width in pixels
        height: Image height in pixels
        font_path: TrueType font to draw the letter with

    Returns:
        PNG-encoded image bytes. The same arguments always give the same bytes.

    Raises:
        InvalidInput: If letter is not exactly one character or a dimension is not positive
    """
    if len(letter) != 1:
        raise InvalidInput(f"Avatar needs exactly one character, got {letter!r}")
    if width <= 0 or height <= 0:
        raise InvalidInput(f"Avatar size must be positive, got {width}x{height}")

    image = Image.new("RGB", (width, height), BACKGROUND)
    draw = ImageDraw.Draw(image)
    draw.text(
        (width / 2, height / 2),
        letter.upper(),
        fill=FOREGROUND,
        font=_load_font(font_path),
        anchor="mm",
    )

    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    return buffer.getvalue()
