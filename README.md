# wfcgen

`wfcgen` produces new images that look like a small sample image, using the
overlapping variant of the *wave function collapse* algorithm.

Every pixel of the sample is recorded together with its eight neighbours (a
`Pattern8`). The output starts with every pixel able to take any colour of
the sample, with all the patterns seen around that colour. After an initial
round of propagation the generator repeatedly picks the undecided pixel with
the lowest entropy, fixes it to one colour (chosen at random, weighted by the
number of patterns still left for each colour), and propagates the
consequences to the surrounding pixels. When a pixel is left with no possible
colour, the generator steps back to the snapshot taken before the latest
collapse, rules out the colour chosen there and carries on. If every snapshot
is used up, generation fails.

## Installation

```
pip install .
```

Pillow is used to read and write image files.

## Command line

Installing the package provides the `wfcgen` command:

```
wfcgen SAMPLE OUTPUT [--width W] [--height H] [--seed N] [--before-collapse PATH]
```

- `SAMPLE` – the sample image to learn patterns from.
- `OUTPUT` – where to write the generated image.
- `--width`, `--height` – size of the output, 50 x 50 by default.
- `--seed` – random seed; by default the current time in milliseconds. The
  seed in use is printed, and the same seed reproduces the same output.
- `--before-collapse PATH` – also write the state after the initial
  propagation, before any pixel has been fixed.

After a successful run the command prints the number of dead pixels and
writes the image. When no consistent image can be found it prints an error
and exits with status 1.

## Library use

```python
from wfcgen.cli import generate
from wfcgen.image import load_image, save_image

sample = load_image("sample.png")
result = generate(sample, 50, 50, 1234)   # an ImageSuperposition
save_image(result.to_image(), "out.png")
```

`generate` raises `wfcgen.cli.GenerationError` when backtracking runs out of
alternatives.

The building blocks are available on their own as well:

- `wfcgen.image` – `Image`, `Pixel`, `load_image` and `save_image`; colours
  are `wfcgen.color.Color` values packed as RGBA with red in the lowest byte.
- `wfcgen.vec2` – `Vec2` grid positions with `from_index`, `to_index` and
  `is_inside`.
- `wfcgen.pattern` – `Pattern8`, the colours of the eight neighbours of a
  pixel (`None` beyond the image edge), the `Direction` enum, and the
  neighbourhood helpers `neighbors`, `neighbors_opt` and `add_neighbors`.
- `wfcgen.stack_set` – `StackSet`, a stack that holds each index at most once.
- `wfcgen.superposition` – `ImageSuperposition` with `extract`, `search`,
  `collapse`, `propagate`, `propagate_all` and `to_image`, plus
  `PixelSuperposition` and `ColorSuperposition`.
- `wfcgen.snapshot` – `Snapshot` and `SnapshotStack` for backtracking.
- `wfcgen.rng` – `Rand32`, a small seeded PCG32 generator, and
  `wfcgen.weighted.random_index` for weighted choices.

A step-by-step run looks like this:

```python
from wfcgen.image import load_image
from wfcgen.superposition import ImageSuperposition

sp = ImageSuperposition(20, 20, 42)
sp.extract(load_image("sample.png"))
sp.propagate_all()
while (index := sp.search()) is not None:
    sp.collapse(index)
    if not sp.propagate(index):
        break  # contradiction; see wfcgen.snapshot for backtracking
image = sp.to_image()
```

In the image returned by `to_image`, pixels that are still undecided are drawn
blue and pixels left without any possible colour are drawn black.

## Limitations

- Patterns are taken from the sample as they are; they are not rotated or
  mirrored.
- Neither the sample nor the output wraps around at the edges: a pattern that
  touched the sample's edge can only be used at the matching edge of the
  output.
- The work is done in pure Python, so large outputs or samples with many
  colours take a long time.

## Tests

```
pip install .[test]
pytest
```