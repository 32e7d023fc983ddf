from dataclasses import dataclass


# fmt: off
@dataclass(frozen=True)
class ShortURLModel:
    target: str     # Original long URL
    shortcode: str  # Short identifier of shortened URL


@dataclass(frozen=True)
class ShortURLRequest:
    url: str                  # URL to shorten
    short: str | None = None  # Caller's desired shortcode (generated when empty)
# fmt: on
