import io
from xml.sax.saxutils import escape
from reportlab.lib.pagesizes import A4, landscape
from reportlab.platypus import SimpleDocTemplate, Table, TableStyle, Paragraph, Spacer
from reportlab.lib import colors
from reportlab.lib.styles import getSampleStyleSheet

from simplemeal.logic.reporting.share_text import meals_for_date
from simplemeal.utilities.constants import CSV_DATE_FORMAT


def generate_pdf_for_plan(scheduled_meals, meals, date_range):
    """Generate a PDF table: Date / Meal / Category / Ingredients, one row per scheduled meal."""
    date_range = list(date_range)
    buf = io.BytesIO()
    doc = SimpleDocTemplate(
        buf, pagesize=landscape(A4),
        rightMargin=20, leftMargin=20, topMargin=20, bottomMargin=20
    )

    styles = getSampleStyleSheet()
    title = "Meal Plan"
    if date_range:
        title += f" – {date_range[0].strftime(CSV_DATE_FORMAT)} to {date_range[-1].strftime(CSV_DATE_FORMAT)}"
    elements = [
        Paragraph(escape(title), styles["Title"]),
        Spacer(1, 16),
    ]

    cell = styles["BodyText"]
    data = [["Date", "Meal", "Category", "Ingredients"]]
    for day in date_range:
        todays = meals_for_date(scheduled_meals, meals, day)
        if not todays:
            data.append([day.strftime("%a %Y-%m-%d"), "-", "", ""])
        for _, meal in todays:
            data.append([
                day.strftime("%a %Y-%m-%d"),
                Paragraph(escape(meal.name), cell),
                meal.category.value,
                Paragraph(escape(", ".join(meal.ingredient_names)), cell),
            ])

    table = Table(data, repeatRows=1, colWidths=[110, 200, 90, 380])
    table.setStyle(TableStyle([
        ("BACKGROUND", (0,0), (-1,0), colors.HexColor("#4CAF50")),
        ("TEXTCOLOR", (0,0), (-1,0), colors.whitesmoke),
        ("ALIGN", (0,0), (-1,-1), "LEFT"),
        ("VALIGN", (0,0), (-1,-1), "TOP"),
        ("FONTNAME", (0,0), (-1,0), "Helvetica-Bold"),
        ("FONTSIZE", (0,0), (-1,0), 12),
        ("BOTTOMPADDING", (0,0), (-1,0), 10),
        ("GRID", (0,0), (-1,-1), 0.5, colors.grey),
    ]))

    elements.append(table)
    doc.build(elements)
    return buf.getvalue()
