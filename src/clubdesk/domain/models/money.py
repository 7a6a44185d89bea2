"""Money value object."""

from dataclasses import dataclass, field
from decimal import Decimal

DEFAULT_CURRENCY = "USD"


@dataclass(frozen=True)
class Money:
    """
    Decimal amount tagged with a currency code.

    Arithmetic is only defined between amounts of the same currency.
    """

    amount: Decimal = field(default_factory=lambda: Decimal("0"))
    currency: str = DEFAULT_CURRENCY

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            object.__setattr__(self, "amount", Decimal(str(self.amount)))

    @classmethod
    def zero(cls, currency: str = DEFAULT_CURRENCY) -> "Money":
        return cls(Decimal("0"), currency)

    def _check(self, other: "Money") -> None:
        if self.currency != other.currency:
            raise ValueError(
                f"Currency mismatch: {self.currency} vs {other.currency}"
            )

    def __add__(self, other: "Money") -> "Money":
        self._check(other)
        return Money(self.amount + other.amount, self.currency)

    def __sub__(self, other: "Money") -> "Money":
        self._check(other)
        return Money(self.amount - other.amount, self.currency)

    @property
    def is_zero(self) -> bool:
        return self.amount == 0

    def quantized(self) -> "Money":
        """Round to cents."""
        return Money(self.amount.quantize(Decimal("0.01")), self.currency)

    def __str__(self) -> str:
        return f"{self.quantized().amount} {self.currency}"
