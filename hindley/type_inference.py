"""
Hindley-Milner type inference with let-polymorphism.

Visiting an expression yields a term (a handle in the engine's graph) for
that expression's type. Each visit also gets:

	env          -- name -> type scheme. Extending it makes a new dict.
	non_generic  -- frozenset of terms pinned by enclosing lambda parameters.

Let-bound schemes are never added to non_generic, so their free variables
stay generic and each lookup gets its own fresh copy. That is all there is
to generalization here.
"""
from typing import NamedTuple, Optional
from boozetools.support.foundation import Visitor
from . import syntax
from .algebra import TypeGraph
from .failures import InferenceError, UnboundIdentifier, DuplicateBinding
from .instantiation import instantiate
from .unification import unify

class Typing(NamedTuple):
	""" The outcome of a successful pass: the whole graph, and which term in it is the answer. """
	graph: TypeGraph
	term: int
	def __str__(self): return self.graph.render(self.term)

class DeductionEngine(Visitor):
	"""
	One pass must run to completion before anything else touches its graph.
	Pass a graph in only if the environment you supply lives in it.
	"""
	def __init__(self, graph:Optional[TypeGraph]=None):
		self.graph = TypeGraph() if graph is None else graph

	def infer(self, expr:syntax.Expression, env:Optional[dict[str, int]]=None, non_generic=frozenset()) -> int:
		return self.visit(expr, {} if env is None else dict(env), frozenset(non_generic))

	def visit_Literal(self, expr:syntax.Literal, env, non_generic):
		return self.graph.integer()

	def visit_Lookup(self, expr:syntax.Lookup, env, non_generic):
		try: scheme = env[expr.name]
		except KeyError: raise UnboundIdentifier(expr.name, expr) from None
		return instantiate(self.graph, scheme, non_generic)

	def visit_Let(self, expr:syntax.Let, env, non_generic):
		if expr.name in env:
			raise DuplicateBinding(expr.name, expr)
		value_type = self.visit(expr.value, env, non_generic)
		return self.visit(expr.body, {**env, expr.name: value_type}, non_generic)

	def visit_Lambda(self, expr:syntax.Lambda, env, non_generic):
		params = {}
		for name in expr.parameters:
			if name in params:
				raise DuplicateBinding(name, expr)
			params[name] = self.graph.variable()
		# Parameters may shadow outer names. They are pinned for the duration of the body.
		res = self.visit(expr.body, {**env, **params}, non_generic.union(params.values()))
		return self.graph.function(params.values(), res)

	def visit_Call(self, expr:syntax.Call, env, non_generic):
		arg_types = [self.visit(a, env, non_generic) for a in expr.args]
		fn_type = self.visit(expr.fn_exp, env, non_generic)
		res_typ = self.graph.variable()
		unify(self.graph, self.graph.function(arg_types, res_typ), fn_type, expr)
		return res_typ

def infer_type(expr:syntax.Expression) -> Typing:
	""" Infer in an empty environment, on a graph of its own. Failures propagate. """
	engine = DeductionEngine()
	return Typing(engine.graph, engine.infer(expr))

def check_program(expr:syntax.Expression, report, path=None) -> Optional[Typing]:
	""" Like infer_type, but failures go into the report instead. """
	report.info("Inferring", path or "program", ":", expr)
	try:
		typing = infer_type(expr)
	except InferenceError as ex:
		report.inference_failed(expr, ex, path)
		return None
	report.info("Found", typing)
	return typing
