# Core type aliases for slang's data model.
# Atoms are plain Python values (float, str, bool) alongside the Symbol and Nil
# types; Lists and Vectors are the sequence classes in slang.types.sequence.
# The same values represent both code (forms) and runtime values.
#
# Naming guidance:
# - SExpression: Use in reader/special-form code to denote syntactic forms.
# - LispValue:  Use in evaluator/runtime code to denote evaluated values.
# Both aliases resolve to `Any` and are interchangeable.

from typing import Any, Callable

__version__ = "0.3.0"

# Runtime value alias
LispValue = Any
# Forms alias (often used interchangeably with LispValue)
SExpression = LispValue

# Native procedure type: receives the calling environment and evaluated arguments
NativeFunction = Callable[..., LispValue]

# Evaluator function type: passed to special forms and the application engine
EvaluatorFn = Callable[..., LispValue]
