from dataclasses import dataclass


# fmt: off
@dataclass(frozen=True)
class LinkModel:
    key: str     # Short key, 6 characters from [0-9a-z]
    target: str  # Original long URL the short key redirects to
# fmt: on
