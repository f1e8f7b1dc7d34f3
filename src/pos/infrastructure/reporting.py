"""Plain-text shipment notice and checkout receipt.

Renderers return lists of lines so the CLI decides where they go.
"""

from __future__ import annotations

from pos.application.dto import ReceiptDTO

SEPARATOR = "-" * 22


def render_shipment_notice(dto: ReceiptDTO) -> list[str]:
    """Lines of the shipment notice, or nothing when no item ships."""
    if not dto.shipment:
        return []
    lines = ["** Shipment notice **"]
    lines.extend(line.description for line in dto.shipment)
    lines.append(f"Total package weight {dto.total_weight}")
    lines.append("")
    return lines


def render_receipt(dto: ReceiptDTO) -> list[str]:
    lines = ["** Checkout receipt **"]
    for item in dto.items:
        lines.append(f"{item.quantity}x {item.product_name}    {item.line_total}")
    lines.append(SEPARATOR)
    lines.append(f"{'Subtotal':<17}{dto.subtotal}")
    lines.append(f"{'Shipping':<17}{dto.shipping}")
    lines.append(f"{'Amount':<17}{dto.total}")
    lines.append("")
    lines.append(f"Customer Balance: {dto.balance}")
    return lines


def render_checkout(dto: ReceiptDTO) -> list[str]:
    return render_shipment_notice(dto) + render_receipt(dto)
