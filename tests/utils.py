# Copyright (c) 2022 Alethea Katherine Flowers.
# Published under the standard MIT License.
# Full text available at: https://opensource.org/licenses/MIT

import pathlib

RESOURCES = pathlib.Path(__file__).parent / "resources"

LINE = [(0, 0), (1, 1), (2, 2), (3, 3)]

# Two curves joined at (10, 0). The first bulges up and the second dips down,
# so the joint is the only sample on the x = 10 line with y = 0.
S_CURVE = [(0, 0), (0, 10), (10, 10), (10, 0), (10, -10), (20, -10), (20, 0)]
