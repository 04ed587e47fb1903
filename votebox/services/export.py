"""PNG pie chart and spreadsheet rendering of poll results."""
import io
from itertools import cycle
from typing import Sequence, Tuple

from openpyxl import Workbook
from openpyxl.styles import Font
from PIL import Image, ImageDraw, ImageFont

from votebox.core.constants import XLS_SHEET_NAME
from votebox.schemas import Option
from votebox.services.results import sort_by_votes

PALETTE = (
    "#4e79a7", "#f28e2b", "#e15759", "#76b7b2", "#59a14f",
    "#edc948", "#b07aa1", "#ff9da7", "#9c755f", "#bab0ac",
)

# The first slice begins 290 degrees counter-clockwise from three o'clock.
# Pillow measures angles clockwise, and slices follow clockwise from there.
START_ANGLE = 360 - 290

MARGIN = 20
TITLE_HEIGHT = 30
LEGEND_SWATCH = 10
LEGEND_LINE = 16


def render_pie_chart(
    options: Sequence[Option],
    title: str = "Voting results",
    size: Tuple[int, int] = (400, 300),
) -> bytes:
    """Draw the vote shares of ``options`` as a pie chart and return PNG bytes.

    Options without votes get no slice but are still listed in the legend.
    """
    width, height = size
    img = Image.new("RGB", size, "white")
    draw = ImageDraw.Draw(img)
    font = ImageFont.load_default()

    # Title, centered
    left, top, right, bottom = draw.textbbox((0, 0), title, font=font)
    draw.text(((width - (right - left)) / 2, (TITLE_HEIGHT - (bottom - top)) / 2), title, fill="black", font=font)

    diameter = max(min(height - TITLE_HEIGHT - MARGIN, width // 2), 1)
    box = (MARGIN, TITLE_HEIGHT, MARGIN + diameter, TITLE_HEIGHT + diameter)

    total = sum(option.votes for option in options)
    colors = dict(zip((option.id for option in options), cycle(PALETTE)))

    if total == 0:
        draw.ellipse(box, outline="gray")
        label = "No votes yet"
        left, top, right, bottom = draw.textbbox((0, 0), label, font=font)
        draw.text(
            (box[0] + (diameter - (right - left)) / 2, box[1] + (diameter - (bottom - top)) / 2),
            label,
            fill="gray",
            font=font,
        )
    else:
        start = START_ANGLE
        for option in options:
            if option.votes == 0:
                continue
            extent = 360 * option.votes / total
            draw.pieslice(box, start, start + extent, fill=colors[option.id], outline="white")
            start += extent

    # Legend to the right of the pie
    x = box[2] + MARGIN
    y = TITLE_HEIGHT
    for option in options:
        if y + LEGEND_LINE > height:
            break
        draw.rectangle((x, y, x + LEGEND_SWATCH, y + LEGEND_SWATCH), fill=colors[option.id])
        draw.text((x + LEGEND_SWATCH + 6, y - 1), f"{option.name} ({option.votes})", fill="black", font=font)
        y += LEGEND_LINE

    buffer = io.BytesIO()
    img.save(buffer, format="PNG")
    return buffer.getvalue()


def build_results_workbook(options: Sequence[Option]) -> bytes:
    """Write the results of a poll, most votes first, as XLSX bytes."""
    wb = Workbook()
    sheet = wb.active
    sheet.title = XLS_SHEET_NAME

    sheet.append(["ID", "Name", "Votes", "Link"])
    for cell in sheet[1]:
        cell.font = Font(bold=True)

    for option in sort_by_votes(options):
        sheet.append([option.id, option.name, option.votes, option.link])

    buffer = io.BytesIO()
    wb.save(buffer)
    return buffer.getvalue()
