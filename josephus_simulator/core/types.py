from typing import Literal

ParameterName = Literal[
    "count",
    "crossed_out",
]
