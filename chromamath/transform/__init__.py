"""Operations defined generically over every color space: interpolation and mixing."""

from .interpolate import HueMode, lerp, hue_lerp
from .mix import mix

__all__ = ['HueMode', 'lerp', 'hue_lerp', 'mix']
