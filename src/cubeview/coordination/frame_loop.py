"""Per-frame driver: advance controls, reschedule, render, spin the object."""

import logging
from typing import Callable, Optional, Protocol, Sequence

from cubeview.constants import ROTATION_STEP
from cubeview.core.clock import DeltaClock
from cubeview.core.events import EventBus, EventType
from cubeview.core.scene_graph import SceneNode

logger = logging.getLogger(__name__)


class Controls(Protocol):
    def update(self, dt: float) -> None: ...


class FrameLoop:
    """Runs one frame per :meth:`tick` and asks the host for the next one.

    Parameters
    ----------
    clock : DeltaClock
        Source of elapsed time between ticks.
    controls : Controls
        Camera controls advanced by the elapsed time.
    render : callable
        Draws the scene once.
    schedule : callable
        Host primitive that arranges for :meth:`tick` to run again before
        the next repaint.
    target : SceneNode
        The object rotated every frame.
    rotation_step : sequence of 3 floats
        Radians added to the target's x, y, z rotation per frame.
    """

    def __init__(
        self,
        clock: DeltaClock,
        controls: Controls,
        render: Callable[[], None],
        schedule: Callable[[Callable[[], None]], None],
        target: SceneNode,
        rotation_step: Sequence[float] = ROTATION_STEP,
        event_bus: Optional[EventBus] = None,
    ) -> None:
        self.clock = clock
        self.controls = controls
        self.render = render
        self.schedule = schedule
        self.target = target
        self.rotation_step = tuple(rotation_step)
        self.event_bus = event_bus
        self.frame_count: int = 0

    def start(self) -> None:
        self.clock.reset()
        self.schedule(self.tick)

    def tick(self) -> None:
        dt = self.clock.get_delta()
        self.controls.update(dt)
        self.schedule(self.tick)
        self.render()
        self.target.rotate(*self.rotation_step)

        self.frame_count += 1
        if self.event_bus is not None:
            self.event_bus.publish(EventType.FRAME_RENDERED, frame=self.frame_count, dt=dt)
