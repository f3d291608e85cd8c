"""
Block-scoped render state.

A RenderContext is created per render call and holds a stack of
BlockContexts. Block helpers push a BlockContext to get local variables
and local helper bindings that disappear when the block is popped.
"""
import logging
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any, Dict, Iterator, List, Optional

from .values import UNDEFINED

if TYPE_CHECKING:
    from .helper import HelperDef

logger = logging.getLogger(__name__)


class Output(ABC):
    """Writer that helpers and templates render into."""

    @abstractmethod
    def write(self, text: str) -> None:
        pass


class StringOutput(Output):
    def __init__(self) -> None:
        self._buffer: List[str] = []

    def write(self, text: str) -> None:
        if text:
            self._buffer.append(text)

    def into_string(self) -> str:
        return "".join(self._buffer)


class BlockContext:
    """Local variables and helper bindings owned by one block."""

    def __init__(self) -> None:
        self.local_vars: Dict[str, Any] = {}
        self.local_helpers: Dict[str, 'HelperDef'] = {}

    def get_local_var(self, name: str) -> Any:
        return self.local_vars.get(name, UNDEFINED)

    def set_local_var(self, name: str, value: Any) -> None:
        self.local_vars[name] = value

    def has_local_var(self, name: str) -> bool:
        return name in self.local_vars

    def register_local_helper(self, name: str, helper: 'HelperDef') -> None:
        self.local_helpers[name] = helper


class RenderContext:
    def __init__(self) -> None:
        self._blocks: List[BlockContext] = []

    @property
    def depth(self) -> int:
        return len(self._blocks)

    def push_block(self, block: BlockContext) -> None:
        self._blocks.append(block)

    def pop_block(self) -> Optional[BlockContext]:
        if not self._blocks:
            return None
        return self._blocks.pop()

    def block(self) -> Optional[BlockContext]:
        """Innermost block, if any."""
        return self._blocks[-1] if self._blocks else None

    @contextmanager
    def scoped_block(self, block: BlockContext) -> Iterator[BlockContext]:
        """Push block for the duration of the with-statement; always pops."""
        self.push_block(block)
        logger.debug(f"scoped_block: pushed, depth={self.depth}")
        try:
            yield block
        finally:
            self.pop_block()
            logger.debug(f"scoped_block: popped, depth={self.depth}")

    def find_block(self, var_name: str) -> Optional[BlockContext]:
        """Innermost block that defines the given local variable."""
        for block in reversed(self._blocks):
            if block.has_local_var(var_name):
                return block
        return None

    def get_local_var(self, name: str) -> Any:
        """Read a local variable of the innermost block (the @name syntax)."""
        block = self.block()
        if block is None:
            return UNDEFINED
        return block.get_local_var(name)

    def register_local_helper(self, name: str, helper: 'HelperDef') -> None:
        block = self.block()
        if block is None:
            raise RuntimeError(f"Cannot register local helper '{name}' outside a block")
        block.register_local_helper(name, helper)

    def get_local_helper(self, name: str) -> Optional['HelperDef']:
        for block in reversed(self._blocks):
            helper = block.local_helpers.get(name)
            if helper is not None:
                return helper
        return None
