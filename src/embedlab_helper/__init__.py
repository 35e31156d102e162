from embedlab_helper.helper import (
  clamp,
  sign,
)

__all__ = [
  "clamp",
  "sign",
]
