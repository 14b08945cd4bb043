import os
import unittest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt5.QtWidgets import QApplication

from apps.BezierTool.pipeline.run_curve import load_case
from apps.BezierView.gui.main_window import BezierViewMainWindow


def _ensure_app():
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    return app


class TestBezierViewMainWindow(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.app = _ensure_app()

    def setUp(self):
        self.window = BezierViewMainWindow()

    def tearDown(self):
        self.window.close()

    def test_window_uses_display_defaults(self):
        self.assertEqual(self.window.window.windowTitle(), "Bézier Curve")
        self.assertEqual(self.window.window.width(), 800)
        self.assertEqual(self.window.window.height(), 600)

    def test_plot_widget_is_scrollable_virtual_canvas(self):
        self.assertIs(self.window.scroll_area.widget(), self.window.plot_widget)
        self.assertEqual(self.window.plot_widget.width(), 500)
        self.assertEqual(self.window.plot_widget.height(), 700)

    def test_curve_is_computed_once_and_cached(self):
        result = self.window.result
        self.assertEqual(result.n_samples, 102)
        self.assertIs(self.window.plot_widget.result, result)
        self.window.plot_widget.draw()
        self.assertIs(self.window.plot_widget.result, result)

    def test_custom_case_changes_canvas(self):
        case = load_case(
            {
                "curve": {"control_points": [[0, 0], [40, 40]], "step_size": 0.5},
                "display": {"padding": 10, "title": "Line"},
            }
        )
        window = BezierViewMainWindow(case)
        try:
            self.assertEqual(window.window.windowTitle(), "Line")
            self.assertEqual(window.plot_widget.width(), 100)
            self.assertEqual(window.result.n_samples, 4)
        finally:
            window.close()


if __name__ == "__main__":
    unittest.main()
