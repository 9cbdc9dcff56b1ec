from dataclasses import dataclass, field


@dataclass(slots=True)
class OfferRecord:
    name: str
    payout: float           # USD
    conversion_rate: float  # percent, as declared
    geo: list[str] = field(default_factory=list)      # US, CA …
    traffic: list[str] = field(default_factory=list)  # Facebook, TikTok …
    cap: int | None = None       # conversions per day
    vertical: str | None = None  # Crypto / Nutra …
