"""
main.py — Bootstrap

1. Load tuning constants
2. Create the app
3. Push the welcome screen
4. Run

    python main.py            # random world
    python main.py --seed 7   # reproducible world
"""

import argparse
from core import tuning
from core.app import App
from scenes.title_scene import TitleScene


def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(description="Egg Toss")
    parser.add_argument("--seed", type=int, default=None,
                        help="seed for world generation and NPC behaviour")
    args = parser.parse_args(argv)

    tuning.load()

    width = int(tuning.get("display", "width", 960))
    height = int(tuning.get("display", "height", 640))
    fps = int(tuning.get("display", "fps", 60))
    app = App(title="Egg Toss", width=width, height=height, fps=fps)

    app.push_scene(TitleScene(seed=args.seed))
    app.run()


if __name__ == "__main__":
    main()
