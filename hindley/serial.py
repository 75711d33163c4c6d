"""
JSON in, JSON out.

A program is a tree of JSON objects, each with a "kind":

	{"kind": "literal", "value": 5}
	{"kind": "lookup", "name": "x"}
	{"kind": "let", "name": "x", "value": ..., "body": ...}
	{"kind": "lambda", "parameters": ["x", ...], "body": ...}
	{"kind": "call", "function": ..., "arguments": [...]}

A type comes out as {"variable": "?a"} or as
{"name": ..., "arguments": [...]} with a "result" if it has one.
Variable names agree with what Render would print.
"""
import json
from pathlib import Path
from typing import Any, Union
from boozetools.support.foundation import Visitor

from . import syntax
from .algebra import TypeGraph, Render, Unknown, Applied
from .failures import InferenceError
from .type_inference import Typing

class MalformedProgram(ValueError):
	def __init__(self, where:str, problem:str):
		super().__init__(where, problem)
		self.where, self.problem = where, problem
	def __str__(self): return "%s: %s" % (self.where, self.problem)

def load_program(path:Path) -> syntax.Expression:
	with open(path, "r", encoding="utf-8") as fh:
		document = json.load(fh)
	return expression_from_json(document)

def expression_from_json(document:Any, where:str="$") -> syntax.Expression:
	if not isinstance(document, dict):
		raise MalformedProgram(where, "expected an object, got %s" % type(document).__name__)
	kind = document.get("kind")
	try: decode = _DECODERS[kind]
	except (KeyError, TypeError):
		raise MalformedProgram(where, "unknown kind %r" % (kind,)) from None
	return decode(document, where)

def _field(document:dict, key:str, where:str):
	try: return document[key]
	except KeyError: raise MalformedProgram(where, "missing %r" % key) from None

def _name(document:dict, key:str, where:str) -> str:
	name = _field(document, key, where)
	if not isinstance(name, str) or not name:
		raise MalformedProgram(where+"."+key, "expected a name")
	return name

def _list(document:dict, key:str, where:str) -> list:
	items = _field(document, key, where)
	if not isinstance(items, list):
		raise MalformedProgram(where+"."+key, "expected a list")
	return items

def _literal(document, where):
	value = _field(document, "value", where)
	if isinstance(value, bool) or not isinstance(value, int):
		raise MalformedProgram(where+".value", "expected an integer")
	return syntax.Literal(value)

def _lookup(document, where):
	return syntax.Lookup(_name(document, "name", where))

def _let(document, where):
	return syntax.Let(
		_name(document, "name", where),
		expression_from_json(_field(document, "value", where), where+".value"),
		expression_from_json(_field(document, "body", where), where+".body"),
	)

def _lambda(document, where):
	parameters = _list(document, "parameters", where)
	for i, p in enumerate(parameters):
		if not isinstance(p, str) or not p:
			raise MalformedProgram("%s.parameters[%d]" % (where, i), "expected a name")
	body = expression_from_json(_field(document, "body", where), where+".body")
	return syntax.Lambda(parameters, body)

def _call(document, where):
	fn_exp = expression_from_json(_field(document, "function", where), where+".function")
	args = [
		expression_from_json(a, "%s.arguments[%d]" % (where, i))
		for i, a in enumerate(_list(document, "arguments", where))
	]
	return syntax.Call(fn_exp, args)

_DECODERS = {
	"literal": _literal,
	"lookup": _lookup,
	"let": _let,
	"lambda": _lambda,
	"call": _call,
}

class ExpressionEncoder(Visitor):
	def visit_Literal(self, expr:syntax.Literal):
		return {"kind": "literal", "value": expr.value}
	def visit_Lookup(self, expr:syntax.Lookup):
		return {"kind": "lookup", "name": expr.name}
	def visit_Let(self, expr:syntax.Let):
		return {"kind": "let", "name": expr.name, "value": self.visit(expr.value), "body": self.visit(expr.body)}
	def visit_Lambda(self, expr:syntax.Lambda):
		return {"kind": "lambda", "parameters": list(expr.parameters), "body": self.visit(expr.body)}
	def visit_Call(self, expr:syntax.Call):
		return {"kind": "call", "function": self.visit(expr.fn_exp), "arguments": [self.visit(a) for a in expr.args]}

def expression_to_json(expr:syntax.Expression) -> dict:
	return ExpressionEncoder().visit(expr)

class TypeEncoder(Visitor):
	def __init__(self, graph:TypeGraph):
		self._graph = graph
		self._render = Render(graph)

	def __call__(self, term:int) -> dict:
		root = self._graph.find(term)
		return self.visit(self._graph.shape(root), root)

	def visit_Unknown(self, slot:Unknown, root:int):
		return {"variable": self._render(root)}

	def visit_Applied(self, slot:Applied, root:int):
		document = {"name": slot.name, "arguments": [self(a) for a in slot.arguments]}
		if slot.result is not None:
			document["result"] = self(slot.result)
		return document

def type_to_json(graph:TypeGraph, term:int) -> dict:
	return TypeEncoder(graph)(term)

def outcome_to_json(program:syntax.Expression, outcome:Union[Typing, InferenceError]) -> dict:
	""" The program alongside either its type or the reason it has none. """
	document = {"program": expression_to_json(program)}
	if isinstance(outcome, InferenceError):
		document["error"] = {"kind": type(outcome).__name__, "message": outcome.describe()}
	else:
		document["type"] = type_to_json(outcome.graph, outcome.term)
	return document
