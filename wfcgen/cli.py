"""Generate an image from the local patterns of a sample image."""

from __future__ import annotations

import argparse
import copy
import logging
import sys
from collections.abc import Sequence

from .image import Image, load_image, save_image
from .snapshot import Snapshot, SnapshotStack
from .superposition import ImageSuperposition

logger = logging.getLogger(__name__)


class GenerationError(RuntimeError):
    """No output consistent with the sample's patterns could be found."""


def _prepare(image: Image, width: int, height: int, seed: int | None) -> ImageSuperposition:
    image_sp = ImageSuperposition(width, height, seed)
    image_sp.extract(image)
    image_sp.propagate_all()
    return image_sp


def _solve(image_sp: ImageSuperposition) -> ImageSuperposition:
    snapshots = SnapshotStack()
    while (pixel_index := image_sp.search()) is not None:
        before = copy.copy(image_sp)
        color_index = image_sp.collapse(pixel_index)
        snapshots.push(Snapshot(before, pixel_index, color_index))

        current = pixel_index
        while not image_sp.propagate(current):
            logger.info("restore, stack size: %d", len(snapshots))
            snapshot = snapshots.pop()
            if snapshot is None:
                raise GenerationError("no consistent image exists")
            image_sp = snapshot.image_sp
            current = snapshot.collapse_pixel_index
    return image_sp


def generate(
    image: Image, width: int, height: int, seed: int | None = None
) -> ImageSuperposition:
    """Collapse a ``width`` x ``height`` superposition built from ``image``."""
    return _solve(_prepare(image, width, height, seed))


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="wfcgen", description="Generate an image from the patterns of a sample image."
    )
    parser.add_argument("input", help="sample image")
    parser.add_argument("output", help="where to write the generated image")
    parser.add_argument("--width", type=int, default=50, help="output width (default 50)")
    parser.add_argument("--height", type=int, default=50, help="output height (default 50)")
    parser.add_argument("--seed", type=int, help="random seed (default: current time)")
    parser.add_argument(
        "--before-collapse", metavar="PATH", help="also write the state after initial propagation"
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    image_sp = _prepare(load_image(args.input), args.width, args.height, args.seed)
    print(f"seed: {image_sp.seed}")

    if args.before_collapse:
        save_image(image_sp.to_image(), args.before_collapse)

    try:
        image_sp = _solve(image_sp)
    except GenerationError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1

    dead = sum(1 for pixel in image_sp.pixels if not pixel.colors)
    print(f"save image, dead pixels: {dead}")
    save_image(image_sp.to_image(), args.output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())