"""Runs a method model through a provider."""
import logging
from typing import Any

from ..jsonrpc.codec import build_payload
from ..providers.base import BaseProvider
from ..utils.errors import NodeError
from .base import AbstractMethodModel, MethodState

logger = logging.getLogger(__name__)


class MethodController:
    """Drives the Idle -> Ready -> Done/Failed lifecycle of a method model."""

    async def execute(
        self,
        method_model: AbstractMethodModel,
        provider: BaseProvider,
        context: Any = None
    ) -> Any:
        """Dispatch ``method_model`` over ``provider`` and return the formatted result.

        Args:
            method_model: Model with its parameters already assigned
            provider: Transport to send the payload over
            context: Passed through to ``before_execution``

        Returns:
            The value produced by ``after_execution``

        Raises:
            FormatError: If the parameters or the result have the wrong shape
            NodeError: If the node answered with an error object
            EthRpcError: Any transport failure reported by the provider
        """
        if method_model.state is not MethodState.IDLE:
            raise ValueError(
                f"{type(method_model).__name__} was already dispatched; "
                "assign new parameters before reusing it"
            )

        try:
            method_model.validate_parameters()
            method_model.before_execution(context)
            method_model.state = MethodState.READY

            payload = build_payload(
                method_model.rpc_method, method_model.parameters, provider.id_sequence
            )
            logger.debug(f"Executing {payload.method} (id={payload.id}) via {provider!r}")
            response = await provider.dispatch(payload)
            if response.error is not None:
                raise NodeError(response.error.code, response.error.message, response.error.data)

            result = method_model.after_execution(response.result)
        except Exception:
            method_model.state = MethodState.FAILED
            raise

        method_model.state = MethodState.DONE
        return result
