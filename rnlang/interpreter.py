"""Interpreter.

This is a tree-walk interpreter for evaluating AST nodes produced by the parser. It supports
arithmetic over the typed value model, lazily bound variables, function definitions and calls,
returns, and output through the builtin print functions.

1. Execution Model
The interpreter evaluates an abstract syntax tree (AST) in a top-down, recursive manner.
Statements are executed via `execute()` / `execute_block()`, and expressions are evaluated
using `eval_expr()`. Both operate over structured tuples representing nodes in the AST.

2. Environment
All mutable state lives in an `ExecutionContext`: the current scope, the stack of frames
pushed by enclosing calls, the function tables and the pending return value. A call pushes the
caller's scope and runs the body in a fresh scope holding the arguments; name lookup falls back
from the current scope to the pushed frames, nearest first.

3. Bindings
`let` binds literal initializers eagerly. Any other initializer is stored unevaluated and
evaluated again, against the current scope, every time the name is read.

4. Returns
`rn` sets the pending return value. A block stops after the statement that set it and the call
that owns the block takes the value. At program level a pending return value is dropped.

5. Error Handling
Runtime errors, such as undefined names, wrong argument counts, operand type mismatches,
division by zero or constructs without an evaluation, are raised as typed exceptions with line
numbers and file context.


File: interpreter.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import logging

from rnlang.environment import ExecutionContext, Function
from rnlang.exceptions import (
    ArityError,
    IntegerOverflowError,
    OperandTypeError,
    UnboundVariableError,
    UndefinedVariableError,
    UnsupportedOperationError,
)
from rnlang.operations import Op
from rnlang.operators import apply_binary
from rnlang.values import LITERAL_NODES, UNSET, Deferred, fits_int, to_text

logger = logging.getLogger(__name__)

BUILTIN_FUNCTIONS = ("print", "println")

# Statements that parse but have no evaluation.
UNSUPPORTED_STATEMENTS = {
    'if': "`if` statement",
    'while': "`while` loop",
    'for': "`for` loop",
    'match': "`match` statement",
    'class': "`class` declaration",
    'parent': "`parent` call",
    'use': "`use` statement",
}

# Type names of the literal nodes a unary operator can inspect.
LITERAL_TYPE_NAMES = {
    'none': "None",
    'bool': "Bool",
    'int': "Int",
    'float': "Float",
    'string': "Str",
    'list': "List",
}


class Interpreter:
    """Tree-walk interpreter for rnlang."""

    def __init__(self, file: str = "<script>", out=None):
        """
        Initialize the interpreter.

        Parameters:
            file (str): Script name used in error messages.
            out: Text stream for print/println; standard output when None.
        """
        self.file = file
        self.out = out
        self.context = ExecutionContext()

    def _format_expr(self, node) -> str:
        """
        Convert AST back to a readable string for error messages.

        Args:
            node (tuple): An expression node, structured as a tuple.

        Returns:
            str: A string representation of the expression.
        """
        op = node[0]
        if isinstance(op, Op):
            return f"{self._format_expr(node[1])} {op.value} {self._format_expr(node[2])}"
        match op:
            case 'ident' | 'flow':
                return node[1]
            case 'int' | 'float':
                return str(node[1])
            case 'bool':
                return "True" if node[1] else "False"
            case 'none':
                return "None"
            case 'string':
                return '"' + node[1] + '"'
            case 'list':
                return '[' + ', '.join(self._format_expr(e) for e in node[1]) + ']'
            case 'dot':
                return f"{self._format_expr(node[1])}.{node[2]}"
            case 'index':
                return f"{self._format_expr(node[1])}[{self._format_expr(node[2])}]"
            case 'func_call':
                args = ', '.join(self._format_expr(arg) for arg in node[2])
                return f"{self._format_expr(node[1])}({args})"
            case 'unary':
                if node[1] in (Op.INC, Op.DEC):
                    return f"{self._format_expr(node[2])}{node[1].value}"
                return f"{node[1].value}{self._format_expr(node[2])}"
            case 'option' | 'default':
                return ".. => { ... }"
            case _:
                return f"<expr {op}>"

    # ------------------------------------------------------------------
    # Expressions
    # ------------------------------------------------------------------

    def eval_expr(self, node):
        """
        Recursively evaluate an expression node and return its computed value.

        Parameters:
            node (tuple): An expression node, structured as a tuple.
                        The first element is the node tag (e.g. 'int', 'ident') or
                        an `Op` for binary operations, the last is the line number.

        Returns:
            The evaluated value.

        Raises:
            UndefinedVariableError: If a variable is referenced that has not been defined.
            UnsupportedOperationError: If the node has no evaluation.
            OperandTypeError: If an operator does not support its operand types.
        """
        op = node[0]
        line = node[-1]

        # Literals
        if op in ('int', 'float', 'string', 'bool'):
            return node[1]
        if op == 'none':
            return None
        if op == 'list':
            return [self.eval_expr(elem) for elem in node[1]]

        # Variables
        if op == 'ident':
            return self.read_variable(node[1], line)

        # Function calls
        if op == 'func_call':
            return self.call_function(node)

        # Binary operations, operands evaluated left to right before dispatch
        if isinstance(op, Op):
            lhs = self.eval_expr(node[1])
            rhs = self.eval_expr(node[2])
            return apply_binary(op, lhs, rhs, line, self.file)

        # Unary operations
        if op == 'unary':
            return self.eval_unary(node)

        raise UnsupportedOperationError(f"`{self._format_expr(node)}`", line, self.file)

    def read_variable(self, name: str, line=None):
        """
        Resolve a name to a value.

        Deferred bindings are evaluated now, in the current scope, and the
        result is not stored.
        """
        binding = self.context.lookup(name, line, self.file)
        if isinstance(binding, Deferred):
            return self.eval_expr(binding.expr)
        if binding is UNSET:
            raise UnboundVariableError(name, line, self.file)
        return binding

    def eval_unary(self, node):
        """
        Evaluate a unary operation.

        `!` and `-` inspect the operand node as written, they do not evaluate
        it: `!` accepts None, boolean, integer and list literals, `-` only
        integer literals. `++` and `--` update a variable in the current scope.
        """
        _, operator, operand, line = node
        kind = operand[0]

        if operator == Op.NOT:
            if kind == 'none':
                return True
            if kind == 'bool':
                return not operand[1]
            if kind == 'int':
                return ~operand[1]
            if kind == 'list':
                return len(operand[1]) == 0
            self._reject_unary(operator, operand, ('float', 'string'), line)

        if operator == Op.SUB:
            if kind == 'int':
                return -operand[1]
            self._reject_unary(operator, operand, ('none', 'bool', 'float', 'string', 'list'), line)

        if operator in (Op.INC, Op.DEC):
            return self._step_variable(operator, operand, line)

        raise UnsupportedOperationError(
            f"`{operator.value}` on `{self._format_expr(operand)}`", line, self.file
        )

    def _reject_unary(self, operator: Op, operand, typed_kinds: tuple, line):
        """Raise the error for a unary operand with no defined result."""
        kind = operand[0]
        if kind in typed_kinds:
            raise OperandTypeError(
                f"Cannot apply unary operator `{operator.value}` to type {LITERAL_TYPE_NAMES[kind]}",
                line,
                self.file,
            )
        raise UnsupportedOperationError(
            f"`{operator.value}` on `{self._format_expr(operand)}`", line, self.file
        )

    def _step_variable(self, operator: Op, operand, line):
        """Apply `++` or `--` to a variable and return the new value."""
        if operand[0] != 'ident':
            raise UnsupportedOperationError(
                f"`{operator.value}` on `{self._format_expr(operand)}`", line, self.file
            )
        name = operand[1]
        binding = self.context.lookup(name, line, self.file)
        if isinstance(binding, bool) or not isinstance(binding, (int, float)):
            raise OperandTypeError(
                f"Wrong use of `{operator.value}` on '{name}'", line, self.file
            )

        value = binding + 1 if operator == Op.INC else binding - 1
        if isinstance(value, int) and not fits_int(value):
            raise IntegerOverflowError(
                f"Integer overflow in `{name}{operator.value}`", line, self.file
            )
        # Only the current scope is written, even when the name came from a caller.
        self.context.bind(name, value)
        return value

    # ------------------------------------------------------------------
    # Functions
    # ------------------------------------------------------------------

    def call_function(self, node):
        """
        Call a builtin or user-defined function.

        Arguments are evaluated in the caller's scope and bound by value in a
        fresh scope. The caller's scope is restored when the call finishes,
        also when it fails.

        Returns:
            The value passed to `rn`, or None.

        Raises:
            UndefinedFunctionError: If no function has the name.
            ArityError: If the argument count differs from the parameter count.
        """
        _, name_node, arg_nodes, line = node
        if name_node[0] != 'ident':
            raise UnsupportedOperationError(
                f"call of `{self._format_expr(name_node)}`", line, self.file
            )
        func_name = name_node[1]

        if func_name in BUILTIN_FUNCTIONS:
            return self._builtin_print(arg_nodes, newline=func_name == "println")

        function = self.context.lookup_function(func_name, line, self.file)
        if len(arg_nodes) != function.arity:
            raise ArityError(func_name, function.arity, len(arg_nodes), line, self.file)

        scope = {}
        for param, arg in zip(function.params, arg_nodes):
            if param[0] != 'ident':
                raise UnsupportedOperationError(
                    f"parameter `{self._format_expr(param)}`", line, self.file
                )
            scope[param[1]] = self.eval_expr(arg)

        logger.debug("Calling %s with %d arguments", func_name, len(arg_nodes))
        self.context.push_frame(scope)
        try:
            self.execute_block(function.body)
            return self.context.take_return()
        finally:
            self.context.pop_frame()

    def _builtin_print(self, arg_nodes, newline: bool):
        """Write the text of every argument, with no separator."""
        text = ''.join(to_text(self.eval_expr(arg)) for arg in arg_nodes)
        print(text, end='\n' if newline else '', file=self.out)

    # ------------------------------------------------------------------
    # Statements
    # ------------------------------------------------------------------

    def execute(self, statements: list):
        """
        Execute a program: a list of top-level statements.

        An `rn` at program level has no caller, so its value is dropped and
        execution continues with the next statement.
        """
        for stmt in statements:
            self.execute_statement(stmt)
            if self.context.returning:
                self.context.take_return()

    def execute_block(self, statements: list) -> bool:
        """
        Execute statements until they run out or one of them returns.

        Returns:
            bool: True if an `rn` is pending.
        """
        for stmt in statements:
            self.execute_statement(stmt)
            if self.context.returning:
                return True
        return False

    def execute_statement(self, stmt: tuple):
        """
        Execute a single statement.

        Parameters:
            stmt (tuple): A ('let' | 'assign' | 'func_def' | 'return' | 'expr_stmt', ...) tuple.

        Raises:
            UnsupportedOperationError: For statements with no evaluation.
        """
        kind = stmt[0]
        line = stmt[-1]

        if kind == 'let':
            _, name_node, expr_node, _ = stmt
            if name_node[0] != 'ident':
                raise UnsupportedOperationError(
                    f"declaration of `{self._format_expr(name_node)}`", line, self.file
                )
            if expr_node is None:
                binding = UNSET
            elif expr_node[0] in LITERAL_NODES:
                binding = self.eval_expr(expr_node)
            else:
                binding = Deferred(expr_node)
            self.context.bind(name_node[1], binding)

        elif kind == 'assign':
            _, var_name, expr_node, _ = stmt
            if not self.context.is_bound(var_name):
                raise UndefinedVariableError(var_name, line, self.file)
            self.context.bind(var_name, self.eval_expr(expr_node))

        elif kind == 'func_def':
            _, name_node, (inputs, outputs), body, _ = stmt
            if name_node[0] != 'ident':
                raise UnsupportedOperationError(
                    f"function name `{self._format_expr(name_node)}`", line, self.file
                )
            self.context.register_function(Function(name_node[1], inputs, outputs, body))
            logger.debug("Registered function %s(%d)", name_node[1], len(inputs))

        elif kind == 'return':
            _, expr_nodes, _ = stmt
            if not expr_nodes:
                value = None
            elif len(expr_nodes) == 1:
                value = self.eval_expr(expr_nodes[0])
            else:
                value = [self.eval_expr(expr) for expr in expr_nodes]
            self.context.return_value = value

        elif kind == 'expr_stmt':
            self.eval_expr(stmt[1])

        elif kind in UNSUPPORTED_STATEMENTS:
            raise UnsupportedOperationError(UNSUPPORTED_STATEMENTS[kind], line, self.file)

        else:
            raise UnsupportedOperationError(f"statement `{kind}`", line, self.file)
