import io

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4, landscape
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from mealbudget.logic.budget.expenses import format_money
from mealbudget.utilities.constants import DAYS, MEAL_TYPES

HEADER_STYLE = [
    ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor("#16A34A")),
    ("TEXTCOLOR", (0, 0), (-1, 0), colors.whitesmoke),
    ("ALIGN", (0, 0), (-1, -1), "CENTER"),
    ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
    ("FONTSIZE", (0, 0), (-1, 0), 12),
    ("BOTTOMPADDING", (0, 0), (-1, 0), 10),
    ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
]


def _build(elements, pagesize):
    buf = io.BytesIO()
    doc = SimpleDocTemplate(
        buf, pagesize=pagesize,
        rightMargin=20, leftMargin=20, topMargin=20, bottomMargin=20
    )
    doc.build(elements)
    return buf.getvalue()


def generate_plan_pdf(plan, expense_total):
    """Day / Breakfast / Lunch / Dinner table for the weekly plan, with the week's total."""
    styles = getSampleStyleSheet()
    elements = [
        Paragraph("Weekly Meal Plan", styles["Title"]),
        Spacer(1, 16),
    ]

    data = [["Day"] + [mt.capitalize() for mt in MEAL_TYPES]]
    for day in DAYS:
        row = [day]
        for meal_type in MEAL_TYPES:
            recipe = plan.get(day, meal_type)
            row.append(f"{recipe.name} ({format_money(recipe.cost)})" if recipe else "-")
        data.append(row)

    table = Table(data, repeatRows=1)
    table.setStyle(TableStyle(HEADER_STYLE))
    elements.append(table)
    elements.append(Spacer(1, 12))
    elements.append(Paragraph(f"Current week expenses: {format_money(expense_total)}", styles["Normal"]))
    return _build(elements, landscape(A4))


def generate_shopping_list_pdf(shopping_list):
    """Printable checklist of the derived shopping list."""
    styles = getSampleStyleSheet()
    elements = [
        Paragraph("Shopping List", styles["Title"]),
        Spacer(1, 16),
    ]
    if len(shopping_list) == 0:
        elements.append(Paragraph("Your shopping list is empty.", styles["Normal"]))
        return _build(elements, A4)

    data = [["", "Item"]]
    for item in shopping_list:
        data.append(["[x]" if item.checked else "[ ]", item.name])
    table = Table(data, repeatRows=1, colWidths=[40, 300])
    table.setStyle(TableStyle(HEADER_STYLE))
    elements.append(table)
    return _build(elements, A4)
