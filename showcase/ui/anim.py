from dataclasses import dataclass
from typing import Callable, Any, List

def ease_linear(t: float) -> float: return t
def ease_out_cubic(t: float) -> float: t = max(0.0, min(1.0, t)); return 1 - (1 - t) ** 3

@dataclass
class Tween:
    obj: Any
    attr: str
    start: float
    end: float
    duration: float
    ease: Callable[[float], float] = ease_out_cubic
    t: float = 0.0
    on_done: Callable[[], None] | None = None
    
    def update(self, dt: float) -> bool:
        self.t += dt
        u = 1.0 if self.duration <= 0 else max(0.0, min(1.0, self.t / self.duration))
        v = self.start + (self.end - self.start) * self.ease(u)
        setattr(self.obj, self.attr, v)
        finished = (u >= 1.0)
        if finished and self.on_done:
            self.on_done()
        return finished
    
class Animator:
    """ Runs tweens; at most one per (obj, attr) so a new target replaces the old one. """
    def __init__(self):
        self._tweens: List[Tween] = []
        
    def add(self, tween: Tween) -> None:
        self.cancel(tween.obj, tween.attr)
        self._tweens.append(tween)

    def cancel(self, obj: Any, attr: str | None = None) -> None:
        self._tweens[:] = [tw for tw in self._tweens
                           if not (tw.obj is obj and (attr is None or tw.attr == attr))]

    def busy(self, obj: Any) -> bool:
        return any(tw.obj is obj for tw in self._tweens)
        
    def update(self, dt: float) -> None:
        self._tweens[:] = [tw for tw in self._tweens if not tw.update(dt)]
