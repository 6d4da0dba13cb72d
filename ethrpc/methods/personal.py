"""Method models for the ``personal_*`` namespace."""
from typing import Any, List, Optional

from .base import AbstractMethodModel


class NewAccountMethodModel(AbstractMethodModel):
    rpc_method_default = "personal_newAccount"
    parameters_amount = 1

    def after_execution(self, response: Any) -> Optional[str]:
        return self.formatters.output_address_formatter(response)


class ListAccountsMethodModel(AbstractMethodModel):
    rpc_method_default = "personal_listAccounts"

    def after_execution(self, response: Any) -> List[str]:
        return [self.formatters.output_address_formatter(address) for address in response or []]


class SignMethodModel(AbstractMethodModel):
    """personal_sign(data, address, password)."""

    rpc_method_default = "personal_sign"
    parameters_amount = 3

    def before_execution(self, context: Any = None) -> None:
        self._parameters[0] = self.formatters.input_sign_formatter(self._parameters[0])
        self._parameters[1] = self.formatters.input_address_formatter(self._parameters[1])


class EcRecoverMethodModel(AbstractMethodModel):
    """personal_ecRecover(data, signature)."""

    rpc_method_default = "personal_ecRecover"
    parameters_amount = 2

    def before_execution(self, context: Any = None) -> None:
        self._parameters[0] = self.formatters.input_sign_formatter(self._parameters[0])

    def after_execution(self, response: Any) -> Optional[str]:
        return self.formatters.output_address_formatter(response)


class SignTransactionMethodModel(AbstractMethodModel):
    """personal_signTransaction(transaction, password); returns the RLP-encoded result."""

    rpc_method_default = "personal_signTransaction"
    parameters_amount = 2

    def before_execution(self, context: Any = None) -> None:
        self._parameters[0] = self.formatters.input_transaction_formatter(self._parameters[0])


class PersonalSendTransactionMethodModel(SignTransactionMethodModel):
    rpc_method_default = "personal_sendTransaction"


class UnlockAccountMethodModel(AbstractMethodModel):
    """personal_unlockAccount(address, password, duration)."""

    rpc_method_default = "personal_unlockAccount"
    parameters_amount = 3

    def before_execution(self, context: Any = None) -> None:
        self._parameters[0] = self.formatters.input_address_formatter(self._parameters[0])


class LockAccountMethodModel(AbstractMethodModel):
    rpc_method_default = "personal_lockAccount"
    parameters_amount = 1

    def before_execution(self, context: Any = None) -> None:
        self._parameters[0] = self.formatters.input_address_formatter(self._parameters[0])
