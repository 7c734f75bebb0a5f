"""Custom exception hierarchy for sepa-writer."""


class SepaError(Exception):
    """Base exception for all sepa-writer errors."""


class NullInputError(SepaError, ValueError):
    """Raised when a required argument is None."""

    def __init__(self, argument: str) -> None:
        super().__init__(f"The {argument} is mandatory and cannot be None.")
        self.argument = argument


class SepaRuleError(SepaError):
    """Raised when a SEPA business rule is violated."""


class MandatoryFieldMissingError(SepaRuleError):
    """Raised when a mandatory field is not set at validation time."""

    def __init__(self, field: str) -> None:
        super().__init__(f"The {field} is mandatory.")
        self.field = field


class InvalidIdentityError(SepaRuleError):
    """Raised when IBAN data fails structural or BIC checks."""


class InvalidDebtorError(InvalidIdentityError):
    """Raised when the debtor IBAN data is invalid or has an unknown BIC."""


class UnsupportedSchemaError(SepaRuleError):
    """Raised when a schema is not accepted by a transfer document."""

    def __init__(self, schema: object) -> None:
        super().__init__(f"Schema {schema} is not supported.")
        self.schema = schema


class InvalidAmountError(SepaRuleError):
    """Raised when a transaction amount is not strictly positive."""


class DuplicateTransactionError(SepaRuleError):
    """Raised when a transaction id is already used in a document."""


class ConfigurationError(SepaError):
    """Raised when configuration is invalid or missing."""
