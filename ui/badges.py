from functools import lru_cache

from PIL import Image, ImageDraw, ImageFont, ImageTk

from model.models import status_tone
from ui.theme import PRIMARY, TONE_COLORS


@lru_cache(maxsize=32)
def _pill(text: str, fill: str, height: int = 22) -> Image.Image:
    """Rounded status pill with white text, sized to its label."""
    font = ImageFont.load_default()
    left, top, right, bottom = ImageDraw.Draw(Image.new("RGBA", (1, 1))).textbbox((0, 0), text, font=font)
    w = (right - left) + height + 8
    img = Image.new("RGBA", (w, height), (0, 0, 0, 0))
    draw = ImageDraw.Draw(img)
    draw.rounded_rectangle([0, 0, w - 1, height - 1], radius=height // 2, fill=fill)
    tx = (w - (right - left)) // 2 - left
    ty = (height - (bottom - top)) // 2 - top
    draw.text((tx, ty), text, fill="white", font=font)
    return img


def status_badge(status: str) -> ImageTk.PhotoImage:
    # callers must hold a reference or Tk drops the image
    color = TONE_COLORS[status_tone(status)]
    return ImageTk.PhotoImage(_pill(status or "unknown", color))


def scroll_top_icon(size: int = 44) -> ImageTk.PhotoImage:
    img = Image.new("RGBA", (size, size), (0, 0, 0, 0))
    draw = ImageDraw.Draw(img)
    draw.ellipse([0, 0, size - 1, size - 1], fill=PRIMARY, outline="white", width=2)
    c = size // 2
    r = size // 4
    draw.polygon([(c, c - r), (c - r, c), (c + r, c)], fill="white")
    draw.rectangle([c - r // 3, c - 1, c + r // 3, c + r], fill="white")
    return ImageTk.PhotoImage(img)
