from PIL import Image, ImageDraw, ImageFont, ImageOps
import base64
import io
import logging
import os
import uuid
from datetime import datetime
from typing import List, Optional
from selfsnap.config import settings
from selfsnap.models.layout import GridLayoutOptions, Rect
from selfsnap.services.color import pick_text_color_from_region
from selfsnap.services.filters import FilterMode, apply_filter
from selfsnap.services.layout import compute_4grid_slots, resolve_options

logger = logging.getLogger(__name__)

SHOTS_PER_COLLAGE = 4
FONT_PATHS = [
    "arial.ttf",
    "/System/Library/Fonts/Arial.ttf",
    "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
]


class PhotoService:
    def __init__(self, canvas_w: Optional[int] = None, canvas_h: Optional[int] = None):
        self.canvas_w = canvas_w or settings.collage_width
        self.canvas_h = canvas_h or settings.collage_height

    def layout_options(self) -> GridLayoutOptions:
        return GridLayoutOptions(canvas_w=self.canvas_w, canvas_h=self.canvas_h)

    def caption_band(self) -> Rect:
        """The bottom reserved band, where the caption goes."""
        band_h = resolve_options(self.layout_options()).bottom_reserved
        return Rect(x=0, y=self.canvas_h - band_h, w=self.canvas_w, h=band_h)

    def create_collage(self, shots: List[str], filter_mode: FilterMode = FilterMode.none,
                       caption: Optional[str] = None, frame: Optional[Image.Image] = None) -> str:
        """Compose four base64 shots into the 2x2 grid.

        ``frame`` is drawn over the whole canvas, stretched to fit; its
        transparent areas let the shots show through. The caption goes on top.
        """
        if len(shots) != SHOTS_PER_COLLAGE:
            raise ValueError(f"A collage needs exactly {SHOTS_PER_COLLAGE} shots, got {len(shots)}")

        images = [Image.open(io.BytesIO(base64.b64decode(shot))) for shot in shots]
        slots = compute_4grid_slots(self.layout_options())
        logger.info("Creating %sx%s collage with filter %s", self.canvas_w, self.canvas_h, filter_mode.value)

        final_img = Image.new('RGB', (self.canvas_w, self.canvas_h), 'white')
        for img, slot in zip(images, slots):
            left, top, right, bottom = slot.box()
            fitted = ImageOps.fit(img.convert('RGB'), (right - left, bottom - top), Image.Resampling.LANCZOS)
            final_img.paste(apply_filter(fitted, filter_mode), (left, top))

        if frame is not None:
            overlay = frame.convert('RGBA').resize((self.canvas_w, self.canvas_h), Image.Resampling.LANCZOS)
            final_img = Image.alpha_composite(final_img.convert('RGBA'), overlay).convert('RGB')

        final_img = self._add_caption(final_img, caption)
        buffer = io.BytesIO()
        final_img.save(buffer, format='JPEG', quality=settings.photo_quality)
        return base64.b64encode(buffer.getvalue()).decode('utf-8')

    def _load_font(self, size: int):
        for font_path in FONT_PATHS:
            try:
                return ImageFont.truetype(font_path, size)
            except OSError:
                continue
        return ImageFont.load_default()

    def _add_caption(self, img: Image.Image, caption: Optional[str]) -> Image.Image:
        text = caption or datetime.now().strftime("%Y-%m-%d %H:%M")
        band = self.caption_band()
        left, top, right, bottom = band.box()

        draw = ImageDraw.Draw(img)
        font = self._load_font(max(int(band.h * 0.4), 12))
        text_bbox = draw.textbbox((0, 0), text, font=font)
        text_width = text_bbox[2] - text_bbox[0]
        text_height = text_bbox[3] - text_bbox[1]

        text_x = left + (right - left - text_width) // 2
        text_y = top + (bottom - top - text_height) // 2 - text_bbox[1]
        fill = pick_text_color_from_region(img, left, top, right - left, bottom - top)
        draw.text((text_x, text_y), text, fill=fill, font=font)

        return img

    def save_collage(self, collage_b64: str, filename: str = None) -> str:
        if filename is None:
            filename = f"collage_{datetime.now().strftime('%Y%m%d_%H%M%S')}_{uuid.uuid4().hex[:8]}.jpg"

        os.makedirs(settings.collages_dir, exist_ok=True)
        filepath = os.path.join(settings.collages_dir, filename)

        img_data = base64.b64decode(collage_b64)
        with open(filepath, 'wb') as f:
            f.write(img_data)

        logger.info("Saved collage %s", filepath)
        return filename


photo_service = PhotoService()
