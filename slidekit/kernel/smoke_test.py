"""
End-to-end smoke test for the slidekit kernel.

Tests the full flow: slide build → subslides → fit → markup
"""

from slidekit.config import build_config, configure_logging
from slidekit.kernel.fit import fit_to_height, fit_to_width
from slidekit.kernel.flow_host import FlowLayoutHost
from slidekit.kernel.markup import serialize
from slidekit.kernel.nodes import heading, list_item, seq, strong, text
from slidekit.kernel.reveal import SlideContext, alternatives, collect_subslides, only, uncover
from slidekit.kernel.types import Fraction, Region


def build_slide(ctx: SlideContext):
    return seq(
        heading("Progress", depth=2),
        list_item(uncover(ctx, "1-", "Parse the ranges")),
        list_item(uncover(ctx, "2-", "Measure the alternatives")),
        list_item(only(ctx, "3-", strong("Fit the content"))),
        alternatives(ctx, "draft", "review", "done", repeat_last=True),
    )


def main():
    configure_logging()
    print("🧪 slidekit Kernel End-to-End Smoke Test")
    print("=" * 60)

    host = FlowLayoutHost()
    region = Region(width=800.0, height=600.0)
    config = build_config({"reveal": {"cover": "rect"}, "cover": {"fill": "#fafaf9"}})

    # Step 1: Build every subslide
    print("\n1️⃣  Building subslides...")
    ctx = SlideContext.from_config(config, host=host, region=region)
    pages = collect_subslides(build_slide, ctx)
    print(f"   ✓ {len(pages)} subslides")

    # Step 2: Markup for the last subslide
    print("\n2️⃣  Serializing the last subslide...")
    for dialect in ("native", "markdown"):
        print(f"   [{dialect}]")
        for line in serialize(pages[-1], dialect).splitlines():
            print(f"   {line}")

    # Step 3: Fit
    print("\n3️⃣  Fitting content...")
    body = text("A sentence that should fill the remaining space.")
    fitted = fit_to_height(body, Fraction(1), host=host, region=region)
    print(f"   ✓ fit_to_height → {fitted.kind}, layout passes so far: {host.passes}")
    widened = fit_to_width(body, 400.0, host=host, region=region)
    print(f"   ✓ fit_to_width → box {widened.attrs['width']} x {widened.attrs['height']}")

    print("\n" + "=" * 60)
    print("✅ Smoke test complete")


if __name__ == "__main__":
    main()
