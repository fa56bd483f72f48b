"""focusrest - terminal Focus/Rest time tracker."""

__version__ = "0.1.0"
