"""
Sample programs, with what inference ought to make of each.

The first two are the classic demonstration. The rest exercise
let-polymorphism, the pinning of lambda parameters, and each way to fail.
An expectation is either the rendered type or the name of the failure.
"""
from typing import NamedTuple
from .syntax import Expression, Literal, Lookup, Let, Lambda, Call

class Sample(NamedTuple):
	name: str
	program: Expression
	expect: str

def _apply(fn:str, *args:Expression) -> Call:
	return Call(Lookup(fn), args)

SAMPLES = [
	Sample(
		"constant_function",
		Lambda(["f"], Literal(5)),
		"Function(?a) -> Integer",
	),
	Sample(
		"apply_identity",
		Let("five", Literal(5), Let("g", Lambda(["f"], Lookup("f")), _apply("g", Lookup("five")))),
		"Integer",
	),
	Sample(
		"let_polymorphism",
		Let("id", Lambda(["x"], Lookup("x")),
			Let("a", _apply("id", Literal(5)), _apply("id", Lookup("id")))),
		"Function(?a) -> ?a",
	),
	Sample(
		"first_of_two",
		Lambda(["x", "y"], Lookup("x")),
		"Function(?a, ?b) -> ?a",
	),
	Sample(
		"compose",
		Lambda(["f", "g"], Lambda(["x"], _apply("f", _apply("g", Lookup("x"))))),
		"Function(Function(?a) -> ?b, Function(?c) -> ?a) -> Function(?c) -> ?b",
	),
	Sample(
		"parameter_through_let",
		Lambda(["x"], Let("y", Lookup("x"), _apply("y", Literal(5)))),
		"Function(Function(Integer) -> ?a) -> ?a",
	),
	Sample(
		"self_application",
		Lambda(["f"], _apply("f", Lookup("f"))),
		"OccursCheckFailure",
	),
	Sample(
		"monomorphic_parameter",
		Lambda(["g"], Let("a", _apply("g", Literal(5)), _apply("g", Lambda(["z"], Lookup("z"))))),
		"TypeMismatch",
	),
	Sample(
		"call_an_integer",
		Call(Literal(5), [Literal(6)]),
		"TypeMismatch",
	),
	Sample(
		"unbound",
		Lookup("y"),
		"UnboundIdentifier",
	),
	Sample(
		"rebinding",
		Let("x", Literal(1), Let("x", Literal(2), Lookup("x"))),
		"DuplicateBinding",
	),
]
