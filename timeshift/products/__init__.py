"""Products: underlyings, FX forward, forward-starting FX forward."""

from timeshift.products.forward_start import ForwardStartFXForward
from timeshift.products.fx import FXForward
from timeshift.products.underlying import Underlying

__all__ = ["Underlying", "FXForward", "ForwardStartFXForward"]
