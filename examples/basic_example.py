"""Basic example: score a few synthetic images and an image file.

Usage:
    python examples/basic_example.py [IMAGE ...]
"""

import sys

import numpy as np
from PIL import Image

from interestingness import ImageInterestingness


def make_examples() -> dict[str, Image.Image]:
    """Build a few small synthetic images."""
    flat = Image.new("RGB", (120, 80), (128, 128, 128))

    centered = flat.copy()
    centered.paste((220, 40, 40), (45, 25, 75, 55))

    cornered = flat.copy()
    cornered.paste((220, 40, 40), (0, 0, 30, 30))

    rng = np.random.default_rng(7)
    noise = Image.fromarray(rng.integers(0, 256, size=(80, 120, 3), dtype=np.uint8))

    return {
        "flat gray": flat,
        "red square, centered": centered,
        "red square, corner": cornered,
        "noise": noise,
    }


def main() -> None:
    """Run the basic example."""
    scorer = ImageInterestingness(scoreDownSample=2)

    print(f"{'Image':<24} {'Detail':>10} {'Saturation':>12} {'Total':>10}")
    print("-" * 60)

    for name, img in make_examples().items():
        score = scorer.analyze(img)
        print(f"{name:<24} {score.detail:>10.2f} {score.saturation:>12.2f} {score.total:>10.2f}")

    for path in sys.argv[1:]:
        score = scorer.analyze_file(path)
        print(f"{path:<24} {score.detail:>10.2f} {score.saturation:>12.2f} {score.total:>10.2f}")


if __name__ == "__main__":
    main()
