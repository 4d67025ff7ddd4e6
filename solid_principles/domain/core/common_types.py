"""Common types shared across bounded contexts."""
from typing import Union

Number = Union[int, float]
