from __future__ import annotations

from decimal import MAX_EMAX, MIN_EMIN, Decimal, localcontext

# Beyond this many digits either side of the point, fixed-point text would be unbounded.
_MAX_FIXED_POINT_DIGITS = 60


def format_decimal(value: Decimal) -> str:
    with localcontext() as ctx:
        ctx.Emax = MAX_EMAX
        ctx.Emin = MIN_EMIN
        quantized = value.normalize()
        if abs(quantized.adjusted()) > _MAX_FIXED_POINT_DIGITS:
            return str(quantized)
        # Avoid scientific notation for integers.
        if quantized == quantized.to_integral():
            return f"{quantized:.0f}"
        return format(quantized, "f")


def format_currency(value: Decimal) -> str:
    if value.adjusted() > _MAX_FIXED_POINT_DIGITS:
        return format_decimal(value)
    with localcontext() as ctx:
        # Keep enough precision to quantize very large amounts to cents.
        ctx.prec = max(ctx.prec, value.adjusted() + 4)
        cents = value.quantize(Decimal("0.01"))
    return f"{cents:.2f}"
