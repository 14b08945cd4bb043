from __future__ import annotations


class CurveError(ValueError):
    pass


class InvalidDegree(CurveError):
    pass


class InvalidStep(CurveError):
    pass
