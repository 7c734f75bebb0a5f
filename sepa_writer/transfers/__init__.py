"""SEPA transfer documents."""

from sepa_writer.transfers.base import MessageInfo, TransactionBook, TransferDocument
from sepa_writer.transfers.credit_transfer import CreditTransfer

__all__ = ["CreditTransfer", "MessageInfo", "TransactionBook", "TransferDocument"]
