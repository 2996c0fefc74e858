from __future__ import annotations


class MaybeError(Exception):
    pass


class IllegalPresentValue(MaybeError, ValueError):
    def __init__(self, message: str = "present() may not wrap None"):
        super().__init__(message)
