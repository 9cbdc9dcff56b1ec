from __future__ import annotations

from offer_parser.models import OfferRecord


# --------- Helpers ---------
def _get(o: OfferRecord, name: str, default: str = "-") -> str:
    """Field as text; None and empty lists -> default."""
    val = getattr(o, name, None)
    if isinstance(val, list):
        val = ", ".join(val)
    return default if val in (None, "") else str(val)

def _num(v: float) -> str:
    # 50.0 -> "50", 42.5 -> "42.5"
    return str(int(v)) if float(v).is_integer() else repr(float(v))

# --------- Offer view ---------
def render_offer(o: OfferRecord) -> str:
    return (
        "Parsed offer:\n"
        f"Name: {_get(o, 'name')}\n"
        f"GEO: {_get(o, 'geo')}\n"
        f"Traffic: {_get(o, 'traffic')}\n"
        f"Payout: {_num(o.payout)} USD\n"
        f"CR: {_num(o.conversion_rate)}%\n"
        f"Cap: {_get(o, 'cap')}\n"
        f"Vertical: {_get(o, 'vertical')}"
    )
