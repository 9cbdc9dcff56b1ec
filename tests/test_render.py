from offer_parser.models import OfferRecord
from offer_parser.render import render_offer


def test_render_defaults_as_dash():
    text = render_offer(OfferRecord(name="Minimal", payout=50.0, conversion_rate=0.5))
    assert text.splitlines() == [
        "Parsed offer:",
        "Name: Minimal",
        "GEO: -",
        "Traffic: -",
        "Payout: 50 USD",
        "CR: 0.5%",
        "Cap: -",
        "Vertical: -",
    ]


def test_render_zero_cap_is_shown():
    text = render_offer(OfferRecord(name="Z", payout=1.5, conversion_rate=2, cap=0))
    assert "Cap: 0" in text
    assert "CR: 2%" in text
