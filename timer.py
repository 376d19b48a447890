import logging

import pygame

logger = logging.getLogger(__name__)

TICK_EVENT = pygame.event.custom_type()


class TickTimer:
    """Fixed-period tick driver built on ``pygame.time.set_timer``.

    Each period pygame posts a ``TICK_EVENT`` to the event queue. Arming the
    timer always cancels the previous one first so there is never more than
    one tick stream.
    """

    def __init__(self, event_type: int = TICK_EVENT):
        self.event_type = event_type
        self.period_ms: int | None = None

    @property
    def active(self) -> bool:
        return self.period_ms is not None

    def start(self, period_ms: int):
        if self.active:
            self.stop()
        pygame.time.set_timer(self.event_type, period_ms)
        self.period_ms = period_ms
        logger.debug("Tick timer armed at %d ms", period_ms)

    def stop(self):
        if not self.active:
            return
        pygame.time.set_timer(self.event_type, 0)
        if pygame.get_init():
            # Drop ticks already queued by the cancelled timer
            pygame.event.clear(self.event_type)
        self.period_ms = None
        logger.debug("Tick timer stopped")

    def reset(self, period_ms: int):
        self.stop()
        self.start(period_ms)
