"""Placeholder thumbnail for entries without an image."""

import io

from PIL import Image, ImageDraw

THUMB_W, THUMB_H = 320, 180

BACKGROUND = (243, 244, 246)
FOREGROUND = (209, 213, 219)


def render_placeholder(width: int = THUMB_W, height: int = THUMB_H) -> bytes:
    """Render a grey 16:9 card with a centered play triangle as PNG bytes."""
    image = Image.new("RGB", (width, height), BACKGROUND)
    draw = ImageDraw.Draw(image)

    size = min(width, height) // 3
    cx, cy = width // 2, height // 2
    draw.ellipse((cx - size, cy - size, cx + size, cy + size), outline=FOREGROUND, width=4)
    half = size // 2
    draw.polygon(
        [(cx - half // 2, cy - half), (cx - half // 2, cy + half), (cx + half, cy)],
        fill=FOREGROUND,
    )

    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    return buffer.getvalue()
