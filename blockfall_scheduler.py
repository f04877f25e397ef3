
"""
Frame scheduler: a throttled tick stream fanned out into two cadences.

The front end calls pump() once per display refresh. A frame only runs when
one has been requested, the way an animation-frame callback only fires
after requestAnimationFrame(); every frame decides for itself whether to
request the next one. Of the frames that run:

  • frames closer than min_frame_ms to the last accepted one are dropped
  • every `frequency` accepted frames, the session gets an input tick
  • every `keyframes` input ticks, it also gets a gravity tick
"""
from __future__ import annotations
import logging
from typing import Callable, Optional

import pygame

log = logging.getLogger(__name__)


class FrameRequest:
    """Handle for one pending frame."""
    def __init__(self):
        self.cancelled = False

    def cancel(self):
        self.cancelled = True


class Scheduler:
    def __init__(self, session, frequency: int, keyframes: int, min_frame_ms: float,
                 clock: Optional[Callable[[], float]] = None):
        self.session = session
        self.frequency = frequency
        self.keyframes = keyframes
        self.min_frame_ms = min_frame_ms
        self.clock = clock or pygame.time.get_ticks
        self.pending: Optional[FrameRequest] = None
        self.frame_count = frequency
        self.keyframe_count = keyframes
        self.last_frame: Optional[float] = None

    def reset(self):
        self.frame_count = self.frequency
        self.keyframe_count = self.keyframes
        self.last_frame = None

    @property
    def armed(self) -> bool:
        return self.pending is not None and not self.pending.cancelled

    def request(self) -> FrameRequest:
        if not self.armed:
            self.pending = FrameRequest()
        return self.pending

    def cancel(self):
        if self.pending is not None:
            self.pending.cancel()
            self.pending = None

    def pump(self) -> bool:
        """Run the pending frame, if any. Returns whether one ran."""
        req = self.pending
        if req is None or req.cancelled:
            return False
        self.pending = None
        self.tick()
        return True

    def tick(self):
        now = self.clock()
        if self.last_frame is not None and now - self.last_frame < self.min_frame_ms:
            self.request()
            return
        self.last_frame = now

        self.frame_count -= 1
        if not self.frame_count:
            self.frame_count = self.frequency
            self.session.input_tick()
            self.keyframe_count -= 1
            if not self.keyframe_count:
                self.keyframe_count = self.keyframes
                if self.session.gravity_tick():
                    log.debug("game ended on gravity tick, scheduler stopped")
                    return
            self.session.render()

        if self.session.running:
            self.request()
