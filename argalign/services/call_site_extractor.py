import codecs
import logging
from collections.abc import Iterator

import tree_sitter_python as tspython
from pydantic import BaseModel, ConfigDict, PrivateAttr
from tree_sitter import Language, Node as TSNode, Parser

from argalign.models.call_site import ArgumentPosition, ExtractedCall
from argalign.models.expressions import (
    CallExpression,
    Identifier,
    MemberAccess,
    OpaqueExpression,
)

logger = logging.getLogger(__name__)

SKIPPED_ARGUMENT_TYPES: set[str] = {"comment"}


class CallSiteExtractor(BaseModel):
    """Collect call expressions and their argument positions from Python source.

    Columns are reported in characters, not bytes, so that arguments containing
    non-ASCII text before them on the same line still compare correctly.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    __parser: Parser = PrivateAttr(default_factory=lambda: Parser(Language(tspython.language())))

    def extract(self, source: str | bytes) -> list[ExtractedCall]:
        """Parse source code and return every call in document order.

        Args:
            source: Python source text or UTF-8 bytes.

        Returns:
            Calls found in the source, nested calls included.
        """

        data: bytes = source.encode("utf-8") if isinstance(source, str) else source
        data = data.removeprefix(codecs.BOM_UTF8)
        tree = self.__parser.parse(data)
        if tree.root_node.has_error:
            logger.debug("Source contains syntax errors; extracting what parsed")
        reader = _SourceReader(data)
        return [reader.to_call(node) for node in _iter_calls(tree.root_node)]


def _iter_calls(root: TSNode) -> Iterator[TSNode]:
    stack: list[TSNode] = [root]
    while stack:
        node = stack.pop()
        if node.type == "call":
            yield node
        stack.extend(reversed(node.children))


class _SourceReader:
    def __init__(self, data: bytes) -> None:
        self.data = data
        self.lines: list[bytes] = data.split(b"\n")

    def snippet(self, node: TSNode) -> str:
        return self.data[node.start_byte : node.end_byte].decode("utf-8", errors="replace")

    def column(self, node: TSNode) -> int:
        row, byte_column = node.start_point
        if row >= len(self.lines):
            return byte_column
        prefix: bytes = self.lines[row][:byte_column]
        return len(prefix.decode("utf-8", errors="replace"))

    def position(self, node: TSNode) -> ArgumentPosition:
        return ArgumentPosition(line=node.start_point[0] + 1, column=self.column(node))

    def callee(self, node: TSNode) -> CallExpression:
        if node.type == "identifier":
            return Identifier(name=self.snippet(node))
        if node.type == "attribute":
            object_node = node.child_by_field_name("object")
            attribute_node = node.child_by_field_name("attribute")
            if object_node is not None and attribute_node is not None:
                return MemberAccess(
                    object=self.callee(object_node),
                    member=Identifier(name=self.snippet(attribute_node)),
                )
        return OpaqueExpression(kind=node.type, text=self.snippet(node))

    def arguments(self, node: TSNode | None) -> tuple[ArgumentPosition, ...]:
        if node is None:
            return ()
        if node.type == "generator_expression":
            body = node.child_by_field_name("body")
            return (self.position(body if body is not None else node),)
        return tuple(
            self.position(child)
            for child in node.named_children
            if child.type not in SKIPPED_ARGUMENT_TYPES
        )

    def to_call(self, node: TSNode) -> ExtractedCall:
        function_node = node.child_by_field_name("function")
        callee: CallExpression = (
            self.callee(function_node)
            if function_node is not None
            else OpaqueExpression(kind="missing", text="")
        )
        return ExtractedCall(
            callee=callee,
            arguments=self.arguments(node.child_by_field_name("arguments")),
            line=node.start_point[0] + 1,
            column=self.column(node),
        )
