import logging

from .config import Config
from .errors import (
    NonPositiveDiceSpec,
    NumberOutOfRange,
    TooManyItems,
    TooManyRollTimes,
    TooManySides,
)

logger = logging.getLogger(__name__)


class LimitTracker:
    """Running counters for a single compilation pass."""

    def __init__(self, config: Config) -> None:
        self.config = config
        self.item_count = 0
        self.roll_times_sum = 0

    def check_number(self, x: int) -> None:
        if abs(x) > self.config.max_number_magnitude:
            logger.debug(
                "number %s exceeds magnitude limit %s",
                x,
                self.config.max_number_magnitude,
            )
            raise NumberOutOfRange(str(x))

    def check_dice(self, times: int, sides: int) -> None:
        if times <= 0 or sides <= 0:
            raise NonPositiveDiceSpec("%sd%s" % (times, sides))
        if times > self.config.max_roll_times:
            logger.debug(
                "dice %sd%s exceeds roll times limit %s",
                times,
                sides,
                self.config.max_roll_times,
            )
            raise TooManyRollTimes("%sd%s" % (times, sides))
        if sides > self.config.max_dice_sides:
            logger.debug(
                "dice %sd%s exceeds sides limit %s",
                times,
                sides,
                self.config.max_dice_sides,
            )
            raise TooManySides("%sd%s" % (times, sides))

    def increment_item_count(self) -> None:
        self.item_count += 1
        if self.item_count > self.config.max_item_count:
            logger.debug("item count exceeds limit %s", self.config.max_item_count)
            raise TooManyItems()

    def increment_roll_times(self, n: int) -> None:
        self.roll_times_sum += n
        if self.roll_times_sum > self.config.max_roll_times:
            logger.debug(
                "roll times sum %s exceeds limit %s",
                self.roll_times_sum,
                self.config.max_roll_times,
            )
            raise TooManyRollTimes()
