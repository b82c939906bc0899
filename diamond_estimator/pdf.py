from io import BytesIO
from datetime import datetime
from typing import Optional
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas as rl_canvas
from reportlab.lib.units import inch

from .constants import FIELD_LABELS, CONFIDENCE_FRACTION
from .content import DISCLAIMER, ESTIMATE_FOOTNOTE
from .pricing import DiamondDescription, PricePrediction, price_breakdown
from .utils import fmt_usd


def _input_value(diamond: DiamondDescription, name: str) -> str:
    v = getattr(diamond, name)
    if v is None:
        return "—"
    if name in ("depth", "table"):
        return f"{v:g}%"
    return str(v)


def build_estimate_pdf(diamond: DiamondDescription, result: PricePrediction,
                       title: str = "Diamond Price Estimator", symbol: str = "$",
                       generated: Optional[datetime] = None) -> bytes:
    buf = BytesIO()
    c = rl_canvas.Canvas(buf, pagesize=letter)
    W, H = letter
    margin = 0.75 * inch

    def text_line(x, y, s, size=10):
        c.setFont("Helvetica", size); c.drawString(x, y, str(s))

    def usd(v):
        return fmt_usd(v, symbol=symbol)

    # Header
    y = H - margin
    c.setTitle(f"{title} Report")
    text_line(margin, y, f"{title} — Estimate Report", 14); y -= 18
    stamp = (generated or datetime.now()).strftime('%Y-%m-%d %H:%M:%S')
    text_line(margin, y, f"Generated: {stamp}", 9); y -= 16

    # Inputs
    text_line(margin, y, "Diamond Specifications:", 12); y -= 12
    for name, label in FIELD_LABELS.items():
        text_line(margin, y, f"• {label}: {_input_value(diamond, name)}", 10); y -= 12

    # Estimate
    y -= 4
    text_line(margin, y, "Estimate:", 12); y -= 12
    terms = price_breakdown(diamond)
    if not terms:
        text_line(margin, y, "• No estimate: carat weight must be greater than 0.", 10); y -= 12
    else:
        text_line(margin, y, f"• Estimated price: {usd(result.prediction)}", 10); y -= 12
        text_line(margin, y, f"• Estimated range (±{CONFIDENCE_FRACTION * 100:.0f}%): "
                             f"{usd(result.lower_bound)} - {usd(result.upper_bound)}", 10); y -= 14

        text_line(margin, y, "Price breakdown (regression terms):", 12); y -= 12
        for t in terms:
            shown = "" if t.value is None else f" ({t.value})"
            text_line(margin + 16, y, f"{t.term}{shown}: {fmt_usd(t.contribution, decimals=2, symbol=symbol)}", 10)
            y -= 12

    # Notes
    y -= 6
    for line in (ESTIMATE_FOOTNOTE, DISCLAIMER):
        t = c.beginText(margin, y)
        t.setFont("Helvetica", 8)
        for chunk in _wrap(line, 110):
            t.textLine(chunk); y -= 10
        c.drawText(t)
        y -= 4

    c.showPage()
    c.save()
    pdf = buf.getvalue()
    buf.close()
    return pdf


def _wrap(s: str, width: int):
    words, line = s.split(), ""
    for w in words:
        if line and len(line) + 1 + len(w) > width:
            yield line
            line = w
        else:
            line = f"{line} {w}" if line else w
    if line:
        yield line
