import io
from xml.sax.saxutils import escape
from typing import Any, Dict, List, Optional

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4, landscape
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from mealplan.logic.planning.normalize import normalize_day_plan
from mealplan.utilities.constants import DISPLAY_MEAL_TYPES


def _cell(slot) -> str:
    return slot.label() if not slot.is_empty() else "-"


def generate_week_pdf(days: List[Dict[str, Any]], prep_schedule: Optional[Dict[str, Dict[str, Any]]] = None,
                      include_kids: bool = False) -> bytes:
    """Generate a printable week: one row per day (adult meals), kids rows when requested,
    followed by the prep list.

    ``days`` are the entries produced by PlanStore.week_days.
    """
    buf = io.BytesIO()
    doc = SimpleDocTemplate(
        buf, pagesize=landscape(A4),
        rightMargin=20, leftMargin=20, topMargin=20, bottomMargin=20
    )

    styles = getSampleStyleSheet()
    first = days[0]['date'] if days else ''
    last = days[-1]['date'] if days else ''
    elements = [
        Paragraph(f"Meal Plan – {first} to {last}", styles["Title"]),
        Spacer(1, 16),
    ]

    data = [["Day"] + [mt.capitalize() for mt in DISPLAY_MEAL_TYPES] + ["Protein"]]
    for day in days:
        plan = normalize_day_plan(day.get('plan'))
        data.append(
            [f"{day.get('short_name', '')} {day['date']}"]
            + [_cell(plan.slot('adult', mt)) for mt in DISPLAY_MEAL_TYPES]
            + [f"{day.get('adult_protein', 0)}g"]
        )
        if include_kids and any(not plan.slot('kids', mt).is_empty() for mt in DISPLAY_MEAL_TYPES):
            data.append(["  Kids"] + [_cell(plan.slot('kids', mt)) for mt in DISPLAY_MEAL_TYPES] + [""])

    table = Table(data, repeatRows=1)
    table.setStyle(TableStyle([
        ("BACKGROUND", (0,0), (-1,0), colors.HexColor("#4CAF50")),
        ("TEXTCOLOR", (0,0), (-1,0), colors.whitesmoke),
        ("ALIGN", (0,0), (-1,-1), "CENTER"),
        ("FONTNAME", (0,0), (-1,0), "Helvetica-Bold"),
        ("FONTSIZE", (0,0), (-1,0), 12),
        ("BOTTOMPADDING", (0,0), (-1,0), 10),
        ("GRID", (0,0), (-1,-1), 0.5, colors.grey),
    ]))
    elements.append(table)

    if prep_schedule:
        elements += [Spacer(1, 16), Paragraph("Prep the day before", styles["Heading2"])]
        for prep_date, bucket in prep_schedule.items():
            for item in bucket['items']:
                elements.append(Paragraph(
                    f"{bucket.get('day_name', prep_date)} (for {bucket.get('for_day', '')} "
                    f"{item.for_meal_type}): <b>{escape(item.recipe_name)}</b> – {escape(item.prep_instructions)}",
                    styles["Normal"],
                ))

    doc.build(elements)
    return buf.getvalue()
