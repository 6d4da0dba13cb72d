"""Method models and the controller that executes them."""
from .base import (
    AbstractMethodModel,
    BlockIdentifierKind,
    BlockIdentifierMethodModel,
    MethodState,
    classify_block_identifier,
)
from .block import (
    GetBlockMethodModel,
    GetBlockNumberMethodModel,
    GetBlockTransactionCountMethodModel,
    GetBlockUncleCountMethodModel,
    GetTransactionFromBlockMethodModel,
    GetUncleMethodModel,
)
from .node import (
    GetAccountsMethodModel,
    GetChainIdMethodModel,
    GetCoinbaseMethodModel,
    RequestAccountsMethodModel,
    VersionMethodModel,
)
from .personal import (
    EcRecoverMethodModel,
    ListAccountsMethodModel,
    LockAccountMethodModel,
    NewAccountMethodModel,
    PersonalSendTransactionMethodModel,
    SignMethodModel,
    SignTransactionMethodModel,
    UnlockAccountMethodModel,
)
from .controller import MethodController

ETH_METHOD_MODELS = {
    "getBlockNumber": GetBlockNumberMethodModel,
    "getBlock": GetBlockMethodModel,
    "getBlockTransactionCount": GetBlockTransactionCountMethodModel,
    "getBlockUncleCount": GetBlockUncleCountMethodModel,
    "getUncle": GetUncleMethodModel,
    "getTransactionFromBlock": GetTransactionFromBlockMethodModel,
    "getChainId": GetChainIdMethodModel,
    "getNetworkVersion": VersionMethodModel,
    "getAccounts": GetAccountsMethodModel,
    "requestAccounts": RequestAccountsMethodModel,
    "getCoinbase": GetCoinbaseMethodModel,
}

PERSONAL_METHOD_MODELS = {
    "newAccount": NewAccountMethodModel,
    "getAccounts": ListAccountsMethodModel,
    "sign": SignMethodModel,
    "ecRecover": EcRecoverMethodModel,
    "signTransaction": SignTransactionMethodModel,
    "sendTransaction": PersonalSendTransactionMethodModel,
    "unlockAccount": UnlockAccountMethodModel,
    "lockAccount": LockAccountMethodModel,
}

__all__ = [
    "AbstractMethodModel",
    "BlockIdentifierKind",
    "BlockIdentifierMethodModel",
    "MethodState",
    "classify_block_identifier",
    "MethodController",
    "ETH_METHOD_MODELS",
    "PERSONAL_METHOD_MODELS",
    "GetBlockMethodModel",
    "GetBlockNumberMethodModel",
    "GetBlockTransactionCountMethodModel",
    "GetBlockUncleCountMethodModel",
    "GetTransactionFromBlockMethodModel",
    "GetUncleMethodModel",
    "GetAccountsMethodModel",
    "GetChainIdMethodModel",
    "GetCoinbaseMethodModel",
    "RequestAccountsMethodModel",
    "VersionMethodModel",
    "EcRecoverMethodModel",
    "ListAccountsMethodModel",
    "LockAccountMethodModel",
    "NewAccountMethodModel",
    "PersonalSendTransactionMethodModel",
    "SignMethodModel",
    "SignTransactionMethodModel",
    "UnlockAccountMethodModel",
]
