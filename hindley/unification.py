"""
The unification half of type-inference:
make two terms denote the same type, or explain why they cannot.
"""
from .algebra import TypeGraph
from .failures import SelfUnification, OccursCheckFailure, TypeMismatch

def unify(graph:TypeGraph, a:int, b:int, at=None):
	"""
	Rules, checked in order on the representatives of each pair:

	1. A variable on the left gets bound to the right side,
	   unless they are the same variable or the right side contains it.
	2. A variable on the right is the same thing the other way around.
	3. Two applications must agree on constructor, argument count,
	   and whether they have a result. Then their parts get unified pairwise.

	Arity and result disagreements are plain type mismatches.
	Nothing is rolled back on failure. The blame goes to ``at``.
	"""
	def push(x, y):
		stack.append((x, y))
	def U(x, y):
		x, y = graph.find(x), graph.find(y)
		if graph.is_variable(x):
			if x == y: raise SelfUnification(graph, x, y, at)
			# if X occurs in Y, then reject. It would be ill-founded.
			if graph.occurs_in(x, y): raise OccursCheckFailure(graph, x, y, at)
			graph.bind(x, y)
		elif graph.is_variable(y):
			U(y, x)
		else:
			p, q = graph.shape(x), graph.shape(y)
			if (
				p.name != q.name
				or len(p.arguments) != len(q.arguments)
				or (p.result is None) != (q.result is None)
			):
				raise TypeMismatch(graph, x, y, at)
			# Last in, first out: the arguments go left to right, each one all the way
			# down before the next, and the result comes after them all.
			if p.result is not None:
				push(p.result, q.result)
			for s, t in reversed(tuple(zip(p.arguments, q.arguments))):
				push(s, t)

	stack = []
	push(a, b)
	while stack:
		U(*stack.pop())
