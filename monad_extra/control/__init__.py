from .basic import unit, when_just, when_just_w, when_justM
from .loop import loop, loop_w, loopM, while_, while_w, whileM

__all__ = (
    # Basic
    "unit",
    "when_just",
    "when_just_w",
    "when_justM",
    # Loop
    "loop",
    "loop_w",
    "loopM",
    "while_",
    "while_w",
    "whileM",
)
