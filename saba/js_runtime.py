"""Tree-walking interpreter for the parsed JavaScript subset."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Union

from saba import js_ast as ast
from saba.dom import Node as DomNode
from saba.dom import Text, get_element_by_id
from saba.errors import BrowserError

_U64_MAX = 0xFFFFFFFFFFFFFFFF
_GET_ELEMENT_BY_ID = "document.getElementById"


class JsError(BrowserError):
    """A script could not be run."""


@dataclass
class HtmlElement:
    """A reference to a document node, optionally to one of its properties."""

    object: DomNode
    property: Optional[str] = None

    def __str__(self) -> str:
        return f"HtmlElement: {self.object!r}"


RuntimeValue = Union[int, str, HtmlElement]


def _is_number(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def add_values(left: RuntimeValue, right: RuntimeValue) -> RuntimeValue:
    """Add two numbers, or concatenate the text of any other pair."""
    if _is_number(left) and _is_number(right):
        total = left + right
        if total > _U64_MAX:
            raise JsError(f"number overflow: {left} + {right}")
        return total
    return f"{left}{right}"


def sub_values(left: RuntimeValue, right: RuntimeValue) -> RuntimeValue:
    """Subtract two numbers; any other pair gives 0."""
    if _is_number(left) and _is_number(right):
        difference = left - right
        if difference < 0:
            raise JsError(f"number underflow: {left} - {right}")
        return difference
    return 0


@dataclass(frozen=True)
class Function:
    """A user-defined function."""

    id: str
    params: tuple[Optional[ast.Node], ...]
    body: Optional[ast.Node]


@dataclass
class Environment:
    """A scope of variables, chained to its enclosing scope."""

    outer: Optional[Environment] = None
    variables: list[tuple[str, Optional[RuntimeValue]]] = field(default_factory=list)

    def get_variable(self, name: str) -> Optional[RuntimeValue]:
        """The value of the nearest variable called ``name``, or None."""
        for var_name, value in self.variables:
            if var_name == name:
                return value
        if self.outer is not None:
            return self.outer.get_variable(name)
        return None

    def add_variable(self, name: str, value: Optional[RuntimeValue]) -> None:
        """Declare a variable in this scope."""
        self.variables.append((name, value))

    def update_variable(self, name: str, value: Optional[RuntimeValue]) -> None:
        """Replace the value of a variable declared in this scope."""
        for index, (var_name, _) in enumerate(self.variables):
            if var_name == name:
                del self.variables[index]
                self.variables.append((name, value))
                return


class JsRuntime:
    """Runs a program against a document tree."""

    def __init__(self, dom_root: DomNode) -> None:
        self.dom_root = dom_root
        self.functions: list[Function] = []
        self.env = Environment()

    def execute(self, program: ast.Program) -> None:
        """Evaluate every top-level statement in the global scope."""
        for node in program.body:
            self.evaluate(node, self.env)

    def _call_browser_api(
        self,
        func: RuntimeValue,
        arguments: tuple[Optional[ast.Node], ...],
        env: Environment,
    ) -> tuple[bool, Optional[RuntimeValue]]:
        if func != _GET_ELEMENT_BY_ID:
            return False, None
        if not arguments:
            raise JsError(f"{_GET_ELEMENT_BY_ID} needs an argument")
        arg = self.evaluate(arguments[0], env)
        if arg is None:
            return True, None
        target = get_element_by_id(self.dom_root, str(arg))
        if target is None:
            return True, None
        return True, HtmlElement(target)

    def evaluate(
        self, node: Optional[ast.Node], env: Optional[Environment] = None
    ) -> Optional[RuntimeValue]:
        """Evaluate ``node`` in ``env`` (the global scope by default)."""
        if env is None:
            env = self.env
        if node is None:
            return None

        match node:
            case ast.ExpressionStatement(expression=expr):
                return self.evaluate(expr, env)

            case ast.AdditiveExpression(operator=op, left=left, right=right):
                left_value = self.evaluate(left, env)
                if left_value is None:
                    return None
                right_value = self.evaluate(right, env)
                if right_value is None:
                    return None
                if op == "+":
                    return add_values(left_value, right_value)
                if op == "-":
                    return sub_values(left_value, right_value)
                return None

            case ast.AssignmentExpression(operator=op, left=left, right=right):
                if op != "=":
                    return None
                if isinstance(left, ast.Identifier):
                    env.update_variable(left.name, self.evaluate(right, env))
                    return None
                target = self.evaluate(left, env)
                if isinstance(target, HtmlElement):
                    right_value = self.evaluate(right, env)
                    if right_value is None:
                        return None
                    if target.property == "textContent":
                        target.object.first_child = DomNode(Text(str(right_value)))
                return None

            case ast.MemberExpression(object=obj, property=prop):
                object_value = self.evaluate(obj, env)
                if object_value is None:
                    return None
                property_value = self.evaluate(prop, env)
                if property_value is None:
                    return object_value
                if isinstance(object_value, HtmlElement):
                    if object_value.property is not None:
                        raise JsError("nested properties of an element are not supported")
                    return HtmlElement(object_value.object, str(property_value))
                # A method such as document.getElementById is called by its dotted name.
                return add_values(add_values(object_value, "."), property_value)

            case ast.NumericLiteral(value=value):
                return value

            case ast.VariableDeclaration(declarations=declarations):
                for declaration in declarations:
                    self.evaluate(declaration, env)
                return None

            case ast.VariableDeclarator(id=ident, init=init):
                if isinstance(ident, ast.Identifier):
                    env.add_variable(ident.name, self.evaluate(init, env))
                return None

            case ast.Identifier(name=name):
                value = env.get_variable(name)
                # A name without a value stands for itself.
                return name if value is None else value

            case ast.StringLiteral(value=value):
                return value

            case ast.BlockStatement(body=body):
                result: Optional[RuntimeValue] = None
                for statement in body:
                    result = self.evaluate(statement, env)
                return result

            case ast.ReturnStatement(argument=argument):
                return self.evaluate(argument, env)

            case ast.FunctionDeclaration(id=ident, params=params, body=body):
                name = self.evaluate(ident, env)
                if isinstance(name, str):
                    self.functions.append(Function(name, tuple(params), body))
                return None

            case ast.CallExpression(callee=callee, arguments=arguments):
                return self._call(callee, tuple(arguments), env)

        raise JsError(f"unsupported node {node!r}")

    def _call(
        self,
        callee: Optional[ast.Node],
        arguments: tuple[Optional[ast.Node], ...],
        env: Environment,
    ) -> Optional[RuntimeValue]:
        new_env = Environment(outer=env)

        callee_value = self.evaluate(callee, new_env)
        if callee_value is None:
            return None

        called, result = self._call_browser_api(callee_value, arguments, new_env)
        if called:
            return result

        function = None
        for candidate in self.functions:
            if callee_value == candidate.id:
                function = candidate
        if function is None:
            raise JsError(f"function {callee!r} doesn't exist")

        if len(arguments) != len(function.params):
            raise JsError(
                f"function {function.id} takes {len(function.params)} arguments "
                f"but got {len(arguments)}"
            )
        for param, argument in zip(function.params, arguments):
            name = self.evaluate(param, new_env)
            if isinstance(name, str):
                value = self.evaluate(argument, new_env)
                new_env.add_variable(name, value)

        return self.evaluate(function.body, new_env)