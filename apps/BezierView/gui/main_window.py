from __future__ import annotations

import logging

from PyQt5.QtCore import Qt
from PyQt5.QtWidgets import QMainWindow, QScrollArea

from apps.BezierTool.pipeline.run_curve import CurveCase, load_case
from apps.BezierView.gui.curve_plot import CurvePlotWidget
from src.curve.models import CurveResult
from src.curve.sampler import compute_curve_from_config

logger = logging.getLogger(__name__)


class BezierViewMainWindow:
    def __init__(self, case: CurveCase | None = None) -> None:
        self.case = case or load_case(None)
        self.result: CurveResult = compute_curve_from_config(self.case.config)
        logger.info("Viewer curve: degree %d, %d samples", self.result.degree, self.result.n_samples)

        self._window = QMainWindow()
        self._window.setWindowTitle(self.case.display.title)
        self._window.resize(*self.case.display.window_size)

        self.plot_widget = CurvePlotWidget(self.case.display)
        self.plot_widget.plot_curve(self.result)

        self.scroll_area = self._init_scroll_area()
        self._window.setCentralWidget(self.scroll_area)

    def _init_scroll_area(self) -> QScrollArea:
        scroll_area = QScrollArea()
        scroll_area.setHorizontalScrollBarPolicy(Qt.ScrollBarAsNeeded)
        scroll_area.setVerticalScrollBarPolicy(Qt.ScrollBarAsNeeded)
        scroll_area.setAlignment(Qt.AlignCenter)
        scroll_area.setWidgetResizable(False)
        scroll_area.setWidget(self.plot_widget)
        return scroll_area

    @property
    def window(self) -> QMainWindow:
        return self._window

    def show(self) -> None:
        self._window.show()

    def close(self) -> None:
        self._window.close()
