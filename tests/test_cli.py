from wfcgen.cli import generate, main
from wfcgen.color import Color
from wfcgen.image import Image, load_image, save_image

A = Color(0xFF0000FF)
B = Color(0xFF00FF00)


def checkerboard(width, height):
    return Image(
        width,
        height,
        [A if (x + y) % 2 == 0 else B for y in range(height) for x in range(width)],
    )


def test_generate_uniform_image():
    result = generate(Image(3, 3, [A] * 9), 5, 4, 1)
    image = result.to_image()
    assert (image.width, image.height) == (5, 4)
    assert image.colors == [A] * 20


def test_generate_checkerboard():
    result = generate(checkerboard(4, 4), 6, 6, 3)
    assert result.search() is None
    assert result.to_image().colors == checkerboard(6, 6).colors


def test_generate_two_pixel_line():
    result = generate(Image(2, 1, [A, B]), 2, 1, 4)
    assert result.to_image().colors == [A, B]


def test_generate_is_deterministic_for_a_seed():
    sample = checkerboard(4, 4)
    first = generate(sample, 5, 5, 42).to_image()
    second = generate(sample, 5, 5, 42).to_image()
    assert first.colors == second.colors


def test_main_writes_output(tmp_path, capsys):
    source = tmp_path / "in.png"
    output = tmp_path / "out.png"
    before = tmp_path / "before.png"
    save_image(Image(3, 3, [A] * 9), source)

    code = main(
        [
            str(source),
            str(output),
            "--width",
            "4",
            "--height",
            "4",
            "--seed",
            "7",
            "--before-collapse",
            str(before),
        ]
    )

    assert code == 0
    result = load_image(output)
    assert (result.width, result.height) == (4, 4)
    assert result.colors == [A] * 16
    assert load_image(before).colors == [A] * 16
    out = capsys.readouterr().out
    assert "seed: 7" in out
    assert "dead pixels: 0" in out