from __future__ import annotations

from .ast import (
    ArrayAst,
    BoolAst,
    IdentifierAst,
    Json,
    NullAst,
    NumberAst,
    ObjectAst,
    PropertyAst,
    StringAst,
)


class Visitor:
    """Depth-first traversal over a parsed tree, one method per node kind.

    Every method defaults to visiting the node's children in source order:
    object properties in stored order, a property's key before its value,
    array elements in stored order. Override a method to observe or mutate
    the node it receives. An override that does not call the base method (or
    visit the children itself) prunes the traversal below that node.

    Nodes are passed directly and may be mutated in place. Do not keep
    references to nodes across calls if you also replace them.

    Start a traversal with ``visitor.visit_json(root)``.
    """

    def visit_json(self, ast: Json) -> None:
        if isinstance(ast, ObjectAst):
            self.visit_object(ast)
        elif isinstance(ast, ArrayAst):
            self.visit_array(ast)
        elif isinstance(ast, StringAst):
            self.visit_string(ast)
        elif isinstance(ast, NumberAst):
            self.visit_number(ast)
        elif isinstance(ast, BoolAst):
            self.visit_bool(ast)
        elif isinstance(ast, NullAst):
            self.visit_null(ast)
        else:
            raise TypeError(f"not a JSON value node: {type(ast)!r}")

    def visit_object(self, ast: ObjectAst) -> None:
        for prop in ast.value:
            self.visit_property(prop)

    def visit_property(self, ast: PropertyAst) -> None:
        self.visit_identifier(ast.key)
        self.visit_property_value(ast.value)

    def visit_identifier(self, ast: IdentifierAst) -> None:
        self.visit_string(ast.value)

    def visit_property_value(self, ast: Json) -> None:
        """Hook for a value in property position; defaults to ``visit_json``."""
        self.visit_json(ast)

    def visit_array(self, ast: ArrayAst) -> None:
        for item in ast.value:
            self.visit_array_item(item)

    def visit_array_item(self, ast: Json) -> None:
        """Hook for a value in array position; defaults to ``visit_json``."""
        self.visit_json(ast)

    def visit_string(self, ast: StringAst) -> None:
        pass

    def visit_number(self, ast: NumberAst) -> None:
        pass

    def visit_bool(self, ast: BoolAst) -> None:
        pass

    def visit_null(self, ast: NullAst) -> None:
        pass
