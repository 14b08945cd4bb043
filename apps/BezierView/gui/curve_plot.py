from __future__ import annotations

from matplotlib.backends.backend_qt5agg import FigureCanvasQTAgg as FigureCanvas
from matplotlib.figure import Figure
from PyQt5.QtWidgets import QSizePolicy, QWidget

from apps.BezierTool.io.schemas import DisplayConfig
from apps.BezierView.render import DEFAULT_DPI, canvas_size, draw_curve
from src.curve.models import CurveResult


class CurvePlotWidget(FigureCanvas):
    def __init__(self, display: DisplayConfig, parent: QWidget | None = None) -> None:
        self.figure = Figure(dpi=DEFAULT_DPI)
        super().__init__(self.figure)
        self.setParent(parent)
        self.axes = self.figure.add_axes([0.0, 0.0, 1.0, 1.0])
        self._display = display
        self._result: CurveResult | None = None
        self.setSizePolicy(QSizePolicy.Fixed, QSizePolicy.Fixed)

    @property
    def result(self) -> CurveResult | None:
        return self._result

    def plot_curve(self, result: CurveResult) -> None:
        self._result = result
        # the scroll area treats the fixed size as the virtual canvas
        self.setFixedSize(*canvas_size(result.bounds, self._display.padding, self._display.min_canvas))
        draw_curve(self.axes, result, self._display)
        self.draw_idle()
