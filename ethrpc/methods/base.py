"""Base method model: one logical RPC operation and its hooks."""
from enum import Enum
from typing import Any, ClassVar, List, Optional, Sequence

from ..formatters import Formatters
from ..utils.errors import InvalidParameterCount
from ..utils.validation import is_block_hash


class MethodState(str, Enum):
    IDLE = "idle"
    READY = "ready"
    DONE = "done"
    FAILED = "failed"


class BlockIdentifierKind(str, Enum):
    HASH = "hash"
    NUMBER = "number"


def classify_block_identifier(formatted: Any) -> BlockIdentifierKind:
    """Classify an already formatted block identifier.

    A 32-byte hex string is a block hash; hex quantities, tags such as
    "latest" and None all address a block by number.
    """
    if is_block_hash(formatted):
        return BlockIdentifierKind.HASH
    return BlockIdentifierKind.NUMBER


class AbstractMethodModel:
    """Binds one RPC operation to its wire method and argument transforms.

    Subclasses declare ``rpc_method_default`` and ``parameters_amount`` and
    override :meth:`before_execution` / :meth:`after_execution` as needed.
    The model owns no provider; it is handed one per call by the controller.
    """

    rpc_method_default: ClassVar[str] = ""
    parameters_amount: ClassVar[int] = 0

    def __init__(self, formatters: Formatters, parameters: Optional[Sequence[Any]] = None):
        self.formatters = formatters
        self._rpc_method = self.rpc_method_default
        self._parameters: List[Any] = list(parameters or [])
        self.state = MethodState.IDLE

    @property
    def rpc_method(self) -> str:
        return self._rpc_method

    @property
    def parameters(self) -> List[Any]:
        return self._parameters

    @parameters.setter
    def parameters(self, value: Sequence[Any]) -> None:
        # Overwriting the arguments returns the model to Idle for reuse
        self._parameters = list(value)
        self._rpc_method = self.rpc_method_default
        self.state = MethodState.IDLE

    def validate_parameters(self) -> None:
        if len(self._parameters) < self.parameters_amount:
            raise InvalidParameterCount(
                self._rpc_method, self.parameters_amount, len(self._parameters)
            )

    def before_execution(self, context: Any = None) -> None:
        """Format parameters before the payload is built."""
        pass

    def after_execution(self, response: Any) -> Any:
        """Convert the raw wire result into the caller-facing value."""
        return response

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(rpc_method={self._rpc_method!r}, "
            f"parameters={self._parameters!r}, state={self.state.value})"
        )


class BlockIdentifierMethodModel(AbstractMethodModel):
    """Model whose wire method depends on the shape of the first argument.

    ``before_execution`` formats the block identifier first and only then
    classifies the formatted value to pick the hash- or number-keyed method.
    """

    number_method: ClassVar[str] = ""
    hash_method: ClassVar[str] = ""

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if cls.number_method:
            cls.rpc_method_default = cls.number_method

    def before_execution(self, context: Any = None) -> None:
        self._parameters[0] = self.formatters.input_block_number_formatter(self._parameters[0])
        self._rpc_method = self.select_method(classify_block_identifier(self._parameters[0]))
        self.format_remaining_parameters()

    def select_method(self, kind: BlockIdentifierKind) -> str:
        if kind is BlockIdentifierKind.HASH:
            return self.hash_method
        return self.number_method

    def format_remaining_parameters(self) -> None:
        pass
