from typing import Any, Union

from pydantic import BaseModel

Number = Union[int, float]

class Rectangle(BaseModel):
    """Width and height with an area derived on read."""
    width: Number
    height: Number

    def __init__(self, *args: Any, **data: Any):
        # Rectangle(10, 20) as well as Rectangle(width=10, height=20)
        if len(args) > 2:
            raise TypeError(f"Rectangle takes at most 2 positional arguments ({len(args)} given)")
        for field, value in zip(("width", "height"), args):
            if field in data:
                raise TypeError(f"Rectangle got multiple values for argument '{field}'")
            data[field] = value
        super().__init__(**data)

    @property
    def area(self) -> Number:
        return self.width * self.height
