# views/widgets.py
from PyQt6.QtCore import Qt, QRectF, QPointF
from PyQt6.QtGui import QColor, QFontMetrics, QPainterPath, QPen, QTextDocument

from constants import AgendaColors, AgendaLayout, AgendaText, get_text_color_for_background


def _escape(text):
    return text.replace('&', '&amp;').replace('<', '&lt;').replace('>', '&gt;')


def draw_appointment(painter, rect, time_text, color=AgendaColors.APPOINTMENT, bordered=True):
    """Rounded box with the untitled label and its time range."""
    painter.save()

    box = QRectF(rect)
    clip_path = QPainterPath()
    clip_path.addRoundedRect(box, AgendaLayout.APPOINTMENT_RADIUS, AgendaLayout.APPOINTMENT_RADIUS)

    painter.setBrush(QColor(color))
    if bordered:
        painter.setPen(QPen(QColor(AgendaColors.APPOINTMENT_BORDER), 1))
    else:
        painter.setPen(Qt.PenStyle.NoPen)
    painter.drawPath(clip_path)
    painter.setClipPath(clip_path)

    text_color = QColor(get_text_color_for_background(color))
    padding = AgendaLayout.APPOINTMENT_PADDING
    text_rect = box.adjusted(padding, 0, -padding, 0)

    font_metrics = QFontMetrics(painter.font())
    if text_rect.width() < font_metrics.horizontalAdvance('...') or text_rect.height() <= 0:
        painter.restore()
        return

    full_html = (f"<p style='margin:0; font-size:8pt;'>{_escape(AgendaText.UNTITLED)}</p>"
                 f"<p style='margin:0; font-size:8pt;'>{_escape(time_text)}</p>")

    doc = QTextDocument()
    doc.setDefaultStyleSheet(f"p {{ color: {text_color.name()}; line-height: 100%; }}")
    doc.setTextWidth(text_rect.width())
    doc.setHtml(full_html)

    painter.translate(text_rect.topLeft())
    doc.drawContents(painter, QRectF(0, 0, text_rect.width(), text_rect.height()))

    painter.restore()


def draw_now_indicator(painter, x, y, width):
    """Red dot on the column edge with a line across the column."""
    painter.save()
    color = QColor(AgendaColors.NOW_INDICATOR)
    painter.setPen(Qt.PenStyle.NoPen)
    painter.setBrush(color)

    radius = AgendaLayout.NOW_DOT_DIAMETER / 2
    painter.drawEllipse(QPointF(x, y), radius, radius)

    line_height = AgendaLayout.NOW_LINE_WIDTH
    painter.drawRect(QRectF(x, y - line_height / 2, width, line_height))
    painter.restore()
