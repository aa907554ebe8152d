from __future__ import annotations

import logging
import time

from noisekit.map2d import BASES, noise_map_2d

logger = logging.getLogger("benchmark")


def _timeit(label: str, fn) -> float:
    t0 = time.perf_counter()
    fn()
    t1 = time.perf_counter()
    ms = (t1 - t0) * 1000.0
    logger.info("%s: %.2f ms", label, ms)
    return ms


def main() -> None:
    """Quick CPU benchmark of vectorized map rendering.

    Every basis is evaluated over a 512x512 grid in one call; the per-pixel
    cost is a handful of numpy passes per lattice corner.
    """

    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")

    for basis in BASES:
        for kernel in ("cubic", "quintic"):
            if basis in {"random", "simplex"} and kernel != "cubic":
                continue
            _timeit(
                f"noise_map_2d {basis}/{kernel} 512x512",
                lambda: noise_map_2d(
                    basis=basis,
                    width=512,
                    height=512,
                    scale=10.0,
                    kernel=kernel,
                ),
            )


if __name__ == "__main__":
    main()
