"""
Demo: Decoding and Rule Validation

Decodes a few element strings and validates them against a shared config,
once collecting every violation and once failing fast.
"""

import json

from gs1_barcode import (
    ParseError,
    ValidatorConfig,
    parse_gs1,
    parse_gs1_to_json,
    to_hri,
    validate,
)
from gs1_barcode.validators.constraints import all_of, matches, max_len


GS = "\x1d"


def demo_validation():
    """Validate several barcodes with the same rules."""

    print("=" * 80)
    print("  DECODE AND VALIDATE DEMO")
    print("=" * 80)

    config = (
        ValidatorConfig()
        .add_required_ai("01")
        .add_required_ai("17")
        .add_forbidden_ai("00")
        .add_constraint("10", all_of([matches(r"^[A-Za-z0-9]+$"), max_len(20)]))
    )

    test_cases = [
        ("Standard pharma pack", "]d2" + "01062867400002491728043010GB2C" + GS + "2171490437969853"),
        ("Bad check digit", "0106286740000248" + "17280430"),
        ("Missing expiry, bad lot", "0106286740000249" + "10GB-2C"),
        ("Unknown AI", "7712345"),
    ]

    for title, barcode in test_cases:
        print(f"\n{title}")
        print("-" * 80)
        print(f"Input: {barcode!r}")

        try:
            ds = parse_gs1(barcode)
        except ParseError as e:
            print(f"Decode error [{e.code.value}]: {e.message}")
            continue

        print(f"HRI:   {to_hri(ds)}")

        for mode, cfg in (("collect all", config), ("fail fast", config.with_fail_fast(True))):
            report = validate(ds, cfg)
            print(f"  {mode:12s} valid={report.valid}")
            for error in report.errors:
                print(f"    - {error.message}")

    print("\n\n" + "=" * 80)
    print("  JSON OUTPUT")
    print("=" * 80)

    barcode = "01062850960028771726033110HN8X" + GS + "2172869453519267"
    print(parse_gs1_to_json(barcode, config=config))

    print("\nRaw AI keys:")
    print(json.dumps(dict(parse_gs1(barcode).ais), indent=2))


if __name__ == "__main__":
    demo_validation()
