"""Parsed output of a SIPS binary invocation."""

from dataclasses import dataclass
from typing import Dict, Optional, Sequence, Tuple

FIELD_DELIMITER = "!"
SUCCESS_STATUS = "0"

# Layout printed by the request binary
REQUEST_FIELDS: Tuple[str, ...] = ("code", "error", "message")

# Layout printed by the response binary (API 6.x)
PAYMENT_FIELDS: Tuple[str, ...] = (
    "code",
    "error",
    "merchant_id",
    "merchant_country",
    "amount",
    "transaction_id",
    "payment_means",
    "transmission_date",
    "payment_time",
    "payment_date",
    "response_code",
    "payment_certificate",
    "authorisation_id",
    "currency_code",
    "card_number",
    "cvv_flag",
    "cvv_response_code",
    "bank_response_code",
    "complementary_code",
    "complementary_info",
    "return_context",
    "caddie",
    "receipt_complement",
    "merchant_language",
    "language",
    "customer_id",
    "order_id",
    "customer_email",
    "customer_ip_address",
    "capture_day",
    "capture_mode",
    "data",
)


@dataclass(frozen=True)
class Response:
    """
    Positional record printed by a SIPS binary.

    Field 0 is the status code ("0" on success) and field 1 the gateway
    error text. The meaning of the remaining fields depends on the binary
    and its version.
    """

    fields: Tuple[str, ...]

    @classmethod
    def from_output(cls, output: str) -> "Response":
        """
        Parse one line of binary output.

        The binaries wrap the record in delimiters (`!0!!...!`); the
        empty fields this produces at either end are dropped.
        """
        line = output.strip()
        fields = line.split(FIELD_DELIMITER)
        if len(fields) > 1 and line.startswith(FIELD_DELIMITER):
            fields = fields[1:]
        if len(fields) > 1 and line.endswith(FIELD_DELIMITER):
            fields = fields[:-1]
        return cls(fields=tuple(fields))

    @property
    def status(self) -> str:
        return self.get(0, "")

    @property
    def error(self) -> str:
        return self.get(1, "")

    @property
    def is_error(self) -> bool:
        return self.status != SUCCESS_STATUS

    def get(self, index: int, default: Optional[str] = None) -> Optional[str]:
        """Get a field by position, or default when the record is shorter."""
        if 0 <= index < len(self.fields):
            return self.fields[index]
        return default

    def to_dict(self, names: Sequence[str] = REQUEST_FIELDS) -> Dict[str, str]:
        """
        Name the positional fields.

        Missing trailing fields map to an empty string; extra fields
        beyond the layout are ignored.
        """
        return {name: self.get(i, "") for i, name in enumerate(names)}

    def __len__(self) -> int:
        return len(self.fields)
