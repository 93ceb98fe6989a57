"""
PDF Deck Plan Generator.

Generates a printable deck plan from a DeckConfig and its MaterialList.
Uses fpdf2 (pure Python, no system dependencies).

Sections:
1. Header + Deck Summary
2. Deck Plan (surface, framing, elevation and isometric views)
3. Materials
4. Notes
"""

import logging
from datetime import datetime

from fpdf import FPDF

from .config import settings
from .models import DeckShape, RailingType, StairLocation, ViewMode
from .rendering.camera import Camera
from .rendering.pdf_surface import PDFSurface
from .rendering.renderer import render_view
from .schemas import WRAP_AROUND_DEFAULT_DEPTH

logger = logging.getLogger(__name__)

SHAPE_NAMES = {
    DeckShape.RECTANGLE: "Rectangle",
    DeckShape.L_SHAPE: "L-Shape",
    DeckShape.T_SHAPE: "T-Shape",
    DeckShape.WRAP_AROUND: "Wrap-Around",
}

VIEW_TITLES = [
    (ViewMode.SURFACE, "Surface"),
    (ViewMode.FRAMING, "Framing"),
    (ViewMode.ELEVATION, "Front Elevation"),
    (ViewMode.ISOMETRIC, "3D View"),
]

# Canvas size each view is rendered at before being fitted into its box
VIEW_CANVAS = (800, 600)
VIEW_BOX_HEIGHT = 68


def _fmt(amount) -> str:
    """Format a number as $X,XXX.XX"""
    try:
        return f"${float(amount):,.2f}"
    except (ValueError, TypeError):
        return "$0.00"


def _fmt_qty(quantity) -> str:
    """12.0 -> 12, 12.5 -> 12.5"""
    try:
        return f"{float(quantity):g}"
    except (ValueError, TypeError):
        return "0"


def _safe(text: str) -> str:
    """Replace Unicode chars that can't be rendered by built-in PDF fonts (latin-1)."""
    if not text:
        return ""
    return (
        text
        .replace("\u2022", "-")    # bullet
        .replace("\u2014", " - ")  # em dash
        .replace("\u2013", "-")    # en dash
        .replace("\u201c", '"')    # left double quote
        .replace("\u201d", '"')    # right double quote
        .replace("\u2018", "'")    # left single quote
        .replace("\u2019", "'")    # right single quote
        .encode("latin-1", errors="replace")
        .decode("latin-1")
    )


def deck_summary(config) -> str:
    """One-line plain-language description of the deck."""
    dims = config.dimensions
    parts = [f"{dims.width:g}' x {dims.depth:g}' {SHAPE_NAMES[config.shape].lower()} deck",
             f"{dims.height:g}' above grade"]
    if config.shape in (DeckShape.L_SHAPE, DeckShape.T_SHAPE) and dims.extension_width:
        parts.append(f"{dims.extension_width:g}' x {dims.extension_depth:g}' extension")
    elif config.shape == DeckShape.WRAP_AROUND:
        parts.append(f"{dims.extension_depth or WRAP_AROUND_DEFAULT_DEPTH:g}' wrap-around strip")

    extras = [f"{config.active_deck_brand} {config.active_deck_line} decking, "
              f"{config.board_pattern.value} pattern"]
    if config.railing != RailingType.NONE:
        extras.append(f"{config.railing.value} railing ({config.active_rail_series})")
    if config.stairs.location != StairLocation.NONE:
        extras.append(f"{config.stairs.width:g}' stairs off the {config.stairs.location.value}")
    extras.append("ledger attached to house" if config.ledger_attached else "freestanding")
    return ", ".join(parts) + ". " + ". ".join(e[0].upper() + e[1:] for e in extras) + "."


class DeckPlanPDF(FPDF):
    """PDF document for deck plans and material lists."""

    def __init__(self, company_name="", company_info=""):
        super().__init__()
        self.company_name = company_name
        self.company_info = company_info
        self.set_auto_page_break(auto=True, margin=20)

    def header(self):
        pass  # Header is drawn once on the first page

    def footer(self):
        self.set_y(-15)
        self.set_font("Helvetica", "I", 8)
        self.set_text_color(150, 150, 150)
        self.cell(0, 10, f"Page {self.page_no()}/{{nb}}", align="C")

    def section_header(self, title):
        """Render a section header bar."""
        self.set_font("Helvetica", "B", 11)
        self.set_fill_color(45, 55, 72)
        self.set_text_color(255, 255, 255)
        self.cell(0, 8, f"  {title}", fill=True, new_x="LMARGIN", new_y="NEXT")
        self.set_text_color(0, 0, 0)
        self.ln(2)

    def table_header(self, cols):
        """Render a table header row. cols: [(label, width), ...]"""
        self.set_font("Helvetica", "B", 8)
        self.set_fill_color(240, 240, 240)
        for label, width in cols:
            align = "R" if label in ("Qty", "Unit Cost", "Total") else "L"
            self.cell(width, 6, label, border="B", fill=True, align=align)
        self.ln()

    def table_row(self, values, widths):
        """Render a table data row; the last three columns are numeric."""
        self.set_font("Helvetica", "", 8)
        for i, (val, width) in enumerate(zip(values, widths)):
            align = "R" if i >= len(widths) - 3 else "L"
            self.cell(width, 5.5, str(val), align=align)
        self.ln()

    def subtotal_row(self, label, amount):
        """Render a total row spanning the full width."""
        self.set_font("Helvetica", "B", 9)
        self.cell(140, 6, label, align="R", border="T")
        self.cell(50, 6, _fmt(amount), align="R", border="T")
        self.ln(8)

    def view_panel(self, config, view_mode, title, x, y, w, h):
        """Draw one rendered view with a caption inside a bordered box."""
        self.set_font("Helvetica", "B", 8)
        self.set_text_color(71, 85, 105)
        self.text(x + 1, y - 1.5, title)
        self.set_text_color(0, 0, 0)
        canvas_w, canvas_h = VIEW_CANVAS
        with PDFSurface(self, x, y, w, h, canvas_w, canvas_h) as surface:
            render_view(surface, config, view_mode, canvas_w, canvas_h, Camera())
        self.set_draw_color(200, 200, 200)
        self.set_line_width(0.2)
        self.rect(x, y, w, h)


def generate_deck_pdf(config, material_list: dict) -> bytes:
    """
    Generate a PDF deck plan.

    Args:
        config: DeckConfig to draw
        material_list: MaterialList dict from the estimator

    Returns:
        PDF bytes
    """
    company_info = " | ".join(p for p in [settings.COMPANY_PHONE, settings.COMPANY_EMAIL] if p)

    pdf = DeckPlanPDF(company_name=settings.COMPANY_NAME, company_info=company_info)
    pdf.alias_nb_pages()
    pdf.add_page()
    pw = pdf.w - pdf.l_margin - pdf.r_margin  # printable width

    # ── SECTION 1: Header ──
    pdf.set_font("Helvetica", "B", 20)
    pdf.cell(0, 10, _safe(settings.COMPANY_NAME), new_x="LMARGIN", new_y="NEXT")
    if company_info:
        pdf.set_font("Helvetica", "", 9)
        pdf.set_text_color(100, 100, 100)
        pdf.cell(0, 5, _safe(company_info), new_x="LMARGIN", new_y="NEXT")
        pdf.set_text_color(0, 0, 0)
    pdf.ln(4)

    title = config.quote_name or "Deck Plan"
    if config.quote_number:
        title = f"{title} #{config.quote_number}"
    pdf.set_font("Helvetica", "B", 14)
    pdf.cell(0, 8, _safe(title), new_x="LMARGIN", new_y="NEXT")
    pdf.set_font("Helvetica", "", 10)
    pdf.cell(0, 5, f"Date: {datetime.now().strftime('%B %d, %Y')}", new_x="LMARGIN", new_y="NEXT")
    pdf.ln(2)
    pdf.set_font("Helvetica", "", 9)
    pdf.multi_cell(0, 4.5, _safe(deck_summary(config)), new_x="LMARGIN", new_y="NEXT")
    pdf.ln(4)

    # ── SECTION 2: Deck plan views, 2 x 2 ──
    pdf.section_header("DECK PLAN")
    gap = 6
    box_w = (pw - gap) / 2
    top = pdf.get_y() + 4
    for i, (view_mode, view_title) in enumerate(VIEW_TITLES):
        col, row = i % 2, i // 2
        x = pdf.l_margin + col * (box_w + gap)
        y = top + row * (VIEW_BOX_HEIGHT + gap + 4)
        pdf.view_panel(config, view_mode, view_title, x, y, box_w, VIEW_BOX_HEIGHT)
    pdf.set_y(top + 2 * (VIEW_BOX_HEIGHT + gap + 4))

    # ── SECTION 3: Materials ──
    pdf.add_page()
    pdf.section_header("MATERIALS")
    cols = [("Item", 50), ("Description", 80), ("Qty", 20), ("Unit Cost", 20), ("Total", 20)]
    widths = [c[1] for c in cols]
    pdf.table_header(cols)
    for item in material_list.get("items", []):
        desc = item.get("description", "")
        pdf.table_row(
            [
                _safe(item.get("name", "")[:30]),
                _safe(desc[:50]),
                f"{_fmt_qty(item.get('quantity', 0))} {item.get('unit', '')}",
                _fmt(item.get("unit_cost", 0)),
                _fmt(item.get("total_cost", 0)),
            ],
            widths,
        )
    pdf.subtotal_row("Estimated Materials Total", material_list.get("total_cost", 0))

    pdf.set_font("Helvetica", "", 9)
    pdf.cell(0, 5, f"Deck area: {material_list.get('total_sq_ft', 0):,.1f} sq ft",
             new_x="LMARGIN", new_y="NEXT")
    pdf.cell(0, 5, f"Railing perimeter: {material_list.get('perimeter_ft', 0):,.1f} linear ft",
             new_x="LMARGIN", new_y="NEXT")
    pdf.ln(4)

    # ── SECTION 4: Notes ──
    notes = list(material_list.get("notes", []))
    if config.quote_notes:
        notes.insert(0, config.quote_notes)
    if notes:
        pdf.section_header("NOTES")
        pdf.set_font("Helvetica", "", 8)
        for note in notes:
            pdf.set_x(pdf.l_margin)
            pdf.multi_cell(pw, 4.5, _safe(f"  - {note}"), new_x="LMARGIN", new_y="NEXT")

    logger.info("Generated deck plan PDF (%d pages)", pdf.page_no())
    return bytes(pdf.output())
