import logging
import random

from .engine import AnimationEngine
from .sorters import algorithm_name, get_sorter

logger = logging.getLogger(__name__)


class Visualizer:
    """
    Owns the logical array and drives the engine.

    restart() sorts the logical array instantly, filling the engine's
    queue; the engine then replays that queue on its own copy of the
    array as ticks come in.
    """

    def __init__(self, engine: AnimationEngine, element_count, max_value,
                 algorithm="quick", rng=None):
        if engine is None:
            raise ValueError("Visualizer needs an animation engine")
        get_sorter(algorithm)
        self.engine        = engine
        self.element_count = element_count
        self.max_value     = max_value
        self.algorithm     = algorithm
        self.rng           = rng or random.Random()
        self.values        = []

    def generate_array(self):
        self.values = [self.rng.randrange(self.max_value) for _ in range(self.element_count)]
        self.engine.values = list(self.values)

    def load_array(self, values):
        """Start over from the given values instead of a random array."""
        self.values = list(values)
        self.engine.values = list(values)
        return self._start()

    def restart(self, regenerate=True) -> bool:
        logger.info("Restarting with %s...", algorithm_name(self.algorithm))
        if regenerate:
            self.generate_array()
        else:
            self.values = list(self.engine.values)
        return self._start()

    def _start(self) -> bool:
        self.engine.grid.clear()
        self.engine.draw_all()
        self.engine.reset()
        try:
            get_sorter(self.algorithm)(self.values, self.engine.queue)
        except Exception:
            logger.exception("%s failed, nothing queued", algorithm_name(self.algorithm))
            self.engine.reset()
            self.values = list(self.engine.values)
            return False
        logger.info("%d actions queued for %d elements",
                    len(self.engine.queue), len(self.values))
        return True

    def select_algorithm(self, key) -> bool:
        get_sorter(key)
        previous, self.algorithm = self.algorithm, key
        if self.restart(False):
            return True
        self.algorithm = previous
        self.restart(False)
        return False

    def run_continuous(self):
        logger.info("Iterating...")
        self.engine.run_continuous()

    def pause(self):
        logger.info("Paused")
        self.engine.pause()

    def single_step(self):
        logger.info("Step")
        self.engine.single_step()

    def caught_up(self) -> bool:
        """True once playback has drained and the picture matches the sort."""
        return self.engine.queue.is_empty() and self.engine.values == self.values
