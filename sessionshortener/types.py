from datetime import datetime
from typing import Literal
from collections.abc import Callable


# Expiry of a shortened URL: absolute UTC timestamp or the 'never' sentinel
type Expiry = datetime | Literal['never']

# Zero-argument source of candidate shortcodes
type ShortcodeDraw = Callable[[], str]

# Zero-argument clock returning an aware UTC datetime
type Clock = Callable[[], datetime]
