# renderer/raytracer.py
import os
import random
import sys
import time
from multiprocessing import Pool
from multiprocessing.pool import ThreadPool
from typing import List, Optional, Tuple
import numpy as np

BACKENDS = ("process", "thread")

# Camera and world installed in each worker by the pool initializer.
_worker_data = {}


def _init_worker(camera, world):
    _worker_data["camera"] = camera
    _worker_data["world"] = world


def _render_row(job: Tuple[int, int]) -> Tuple[int, np.ndarray]:
    j, row_seed = job
    rng = random.Random(row_seed)
    return j, _worker_data["camera"].render_row(j, _worker_data["world"], rng)


def row_seeds(seed: Optional[int], height: int) -> List[int]:
    """
    One independent seed per scanline. A fixed `seed` reproduces the same
    streams no matter which worker ends up rendering which row.
    """
    children = np.random.SeedSequence(seed).spawn(height)
    return [int(child.generate_state(1, dtype=np.uint64)[0]) for child in children]


class Renderer:
    """
    Renders a camera's view of a world scanline by scanline.

    Rows are independent, so they are spread over a pool of workers
    (processes or threads) and written back into their own slot of the
    image buffer as they complete. Each row draws from its own random
    generator; nothing shared is mutated while rendering.
    """
    def __init__(self, workers: Optional[int] = None, backend: str = "process",
                 seed: Optional[int] = None, progress: bool = True):
        if backend not in BACKENDS:
            raise ValueError(f"Unknown backend {backend!r}, expected one of {BACKENDS}")
        if workers is not None and workers < 1:
            raise ValueError(f"workers must be at least 1, got {workers}")
        self.workers = workers if workers is not None else (os.cpu_count() or 1)
        self.backend = backend
        self.seed = seed
        self.progress = progress

    def render(self, camera, world) -> np.ndarray:
        """
        Returns the linear radiance image, shaped (height, width, 3), rows
        ordered top to bottom.
        """
        camera.initialize()
        height = camera.image_height
        image = np.zeros((height, camera.image_width, 3), dtype=np.float64)
        jobs = list(enumerate(row_seeds(self.seed, height)))

        start_time = time.time()
        completed = 0
        if self.workers == 1:
            _init_worker(camera, world)
            try:
                for job in jobs:
                    j, row = _render_row(job)
                    image[j] = row
                    completed += 1
                    self._report(height - completed)
            finally:
                _worker_data.clear()
        else:
            pool_class = Pool if self.backend == "process" else ThreadPool
            with pool_class(processes=self.workers, initializer=_init_worker,
                            initargs=(camera, world)) as pool:
                for j, row in pool.imap_unordered(_render_row, jobs):
                    image[j] = row
                    completed += 1
                    self._report(height - completed)

        if self.progress:
            print(f"\nDone in {time.time() - start_time:.1f}s.", file=sys.stderr)
        return image

    def _report(self, remaining: int):
        if self.progress:
            print(f"\rScanlines remaining: {remaining} ", end="", file=sys.stderr, flush=True)
