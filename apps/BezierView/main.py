from __future__ import annotations

import sys

from PyQt5.QtWidgets import QApplication

from apps.BezierTool.pipeline.run_curve import CurveCase
from apps.BezierView.gui.main_window import BezierViewMainWindow


def main(case: CurveCase | None = None) -> int:
    app = QApplication.instance() or QApplication(sys.argv)
    window = BezierViewMainWindow(case)
    window.show()
    return app.exec_()


if __name__ == "__main__":
    raise SystemExit(main())
