"""Input guard for flip changes.

Vetoes vertical-flip changes while both opposing directional inputs are
pressed, which otherwise makes sprites flicker between orientations.
"""

import logging
from typing import Optional

from ..host import Direction, InputSource


class InputGuard:
    """Decision gate consulted before flip changes.

    Disabled by default. Once enabled it stays enabled; there is no way to
    disable it again.
    """

    def __init__(self, input_source: Optional[InputSource] = None):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.input_source = input_source
        self._enabled = False
        # Last direction seen pressed on its own
        self._last_direction: Optional[Direction] = None

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def last_direction(self) -> Optional[Direction]:
        """Last direction that was pressed without its opposite, if any."""
        return self._last_direction

    def enable(self) -> None:
        if not self._enabled:
            self._enabled = True
            self.logger.debug("Input protection enabled")

    def should_process(self) -> bool:
        """Check whether a flip change may go ahead.

        Returns:
            False only when protection is enabled and left and right are
            pressed at the same time
        """
        if not self._enabled or self.input_source is None:
            return True

        left = self.input_source.is_pressed(Direction.LEFT)
        right = self.input_source.is_pressed(Direction.RIGHT)

        if left and right:
            self.logger.debug("Flip vetoed: left and right pressed together")
            return False

        if left:
            self._last_direction = Direction.LEFT
        elif right:
            self._last_direction = Direction.RIGHT
        return True
