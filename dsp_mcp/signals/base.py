"""
Base class for continuous-time signals
"""

from abc import ABC, abstractmethod
from numbers import Number


class ContinuousSignal(ABC):
    """Abstract base class for a signal f: R -> C

    Evaluation must be a pure function of the time index. Signals are
    built once and never mutated; combinators hold references to their
    operands and re-evaluate them on demand.
    """

    @abstractmethod
    def evaluate(self, t: float) -> complex:
        """Evaluate the signal at time t"""
        pass

    def __call__(self, t: float) -> complex:
        return self.evaluate(t)

    def __add__(self, other):
        if isinstance(other, ContinuousSignal):
            from .combinators import add
            return add(self, other)
        return NotImplemented

    def __mul__(self, other):
        from .combinators import modulate, scale
        if isinstance(other, ContinuousSignal):
            return modulate(self, other)
        if isinstance(other, Number):
            return scale(self, other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, Number):
            from .combinators import scale
            return scale(self, other)
        return NotImplemented

    def __neg__(self):
        from .combinators import scale
        return scale(self, -1)
