"""Analysis output panel: verdict banner, counts, and breakdown bars.

Shows the recommended action and whether the user's choice matched it,
the better/worse/tie counts, and for each bucket a horizontal bar per
opponent hand category with a few example holdings.
"""

from __future__ import annotations

from PySide6.QtCore import QRectF, Qt
from PySide6.QtGui import QColor, QFont, QPainter
from PySide6.QtWidgets import (
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QSizePolicy,
    QVBoxLayout,
    QWidget,
)

from flop_coach.core.equity_calculator import CategoryBreakdown, EquityResult
from flop_coach.strategy.decision_rule import Verdict
from flop_coach.utils.card import format_cards
from flop_coach.utils.constants import Recommendation

# Recommendation -> (background color, text color)
_REC_COLORS = {
    Recommendation.CALL: ("#059669", "#fff"),
    Recommendation.FOLD: ("#e11d48", "#fff"),
}

_BANNER_IDLE = (
    "QLabel { font-size: 18px; font-weight: bold; color: #94a3b8;"
    " background: #1e293b; border-radius: 8px; }"
)


class BreakdownBarChart(QWidget):
    """Custom-painted horizontal bars: one per opponent hand category."""

    def __init__(self, bar_color: str, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._bar_color = QColor(bar_color)
        self._entries: list[CategoryBreakdown] = []
        self._total = 0
        self.setMinimumHeight(30)
        self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)

    def set_breakdown(self, entries: list[CategoryBreakdown]) -> None:
        """Set the rows to display, most frequent first."""
        self._entries = sorted(entries, key=lambda e: -e.count)
        self._total = max((e.count for e in self._entries), default=0)
        self.update()

    def clear(self) -> None:
        self._entries = []
        self._total = 0
        self.update()

    def paintEvent(self, event) -> None:
        if not self._entries:
            return
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing)

        w = self.width()
        row_h = 22
        margin_left = 118
        count_w = 44
        bar_max_w = max(20, (w - margin_left - count_w) // 2)
        y = 4

        label_font = QFont("Segoe UI", 10, QFont.Bold)
        detail_font = QFont("Segoe UI", 9)

        for entry in self._entries:
            painter.setFont(label_font)
            painter.setPen(QColor("#e2e8f0"))
            painter.drawText(
                QRectF(4, y, margin_left - 8, row_h),
                Qt.AlignVCenter | Qt.AlignRight,
                entry.label,
            )

            bar_w = max(4, int(bar_max_w * entry.count / self._total))
            painter.setBrush(self._bar_color)
            painter.setPen(Qt.NoPen)
            painter.drawRoundedRect(QRectF(margin_left, y + 3, bar_w, row_h - 6), 3, 3)

            painter.setFont(detail_font)
            painter.setPen(QColor("#cbd5e1"))
            detail = f"{entry.count}   e.g. {', '.join(entry.samples)}"
            painter.drawText(
                QRectF(margin_left + bar_w + 6, y, w - margin_left - bar_w - 10, row_h),
                Qt.AlignVCenter | Qt.AlignLeft,
                detail,
            )

            y += row_h + 2

        painter.end()
        self.setMinimumHeight(y + 4)


class AnalysisOutputPanel(QWidget):
    """Displays the verdict, the counts and both breakdowns."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(8, 4, 8, 4)

        self._banner = QLabel()
        self._banner.setAlignment(Qt.AlignCenter)
        self._banner.setFixedHeight(48)
        layout.addWidget(self._banner)

        self._summary = QLabel()
        self._summary.setWordWrap(True)
        self._summary.setStyleSheet("QLabel { color: #e2e8f0; font-size: 13px; padding: 4px; }")
        layout.addWidget(self._summary)

        bars_row = QHBoxLayout()
        better_group = QGroupBox("Hands beating you")
        better_layout = QVBoxLayout(better_group)
        self._better_bars = BreakdownBarChart("#e11d48")
        better_layout.addWidget(self._better_bars)
        bars_row.addWidget(better_group)

        worse_group = QGroupBox("Hands you beat")
        worse_layout = QVBoxLayout(worse_group)
        self._worse_bars = BreakdownBarChart("#059669")
        worse_layout.addWidget(self._worse_bars)
        bars_row.addWidget(worse_group)
        layout.addLayout(bars_row)

        layout.addStretch()
        self.clear()

    def show_analyzing(self) -> None:
        """Show a counting indicator."""
        self._banner.setText("Counting every opponent hand...")
        self._banner.setStyleSheet(
            "QLabel { font-size: 18px; font-weight: bold; color: #f59e0b;"
            " background: #451a03; border-radius: 8px; }"
        )
        self._summary.clear()
        self._better_bars.clear()
        self._worse_bars.clear()

    def show_result(self, result: EquityResult, verdict: Verdict) -> None:
        rec = result.recommendation
        bg, fg = _REC_COLORS.get(rec, ("#475569", "#fff"))
        grade = "Correct!" if verdict.correct else f"You chose {verdict.choice.value.upper()}"
        self._banner.setText(f">>> {rec.value.upper()} <<<   {grade}")
        self._banner.setStyleSheet(
            f"QLabel {{ font-size: 18px; font-weight: bold; color: {fg};"
            f" background: {bg}; border-radius: 8px; }}"
        )

        self._summary.setText(
            f"{format_cards(result.hero_cards)} on {format_cards(result.flop_cards)}:"
            f" you have {result.hero_category}.\n"
            f"Better than you: {result.better}    Worse than you: {result.worse}"
            f"    Ties: {result.tie}    (of {result.total} possible hands)"
        )
        self._better_bars.set_breakdown(list(result.better_breakdown.values()))
        self._worse_bars.set_breakdown(list(result.worse_breakdown.values()))

    def show_error(self, message: str) -> None:
        self._banner.setText("Error")
        self._banner.setStyleSheet(
            "QLabel { font-size: 18px; font-weight: bold; color: #fff;"
            " background: #e11d48; border-radius: 8px; }"
        )
        self._summary.setText(message)
        self._better_bars.clear()
        self._worse_bars.clear()

    def show_status(self, message: str) -> None:
        self._summary.setText(message)

    def clear(self) -> None:
        self._banner.setText("Pick CALL or FOLD")
        self._banner.setStyleSheet(_BANNER_IDLE)
        self._summary.clear()
        self._better_bars.clear()
        self._worse_bars.clear()
