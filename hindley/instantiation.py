"""
This is where let-polymorphism comes from.

A type scheme is just a term. Using it somewhere means taking a fresh copy,
in which every generic variable is replaced by a brand-new one. A variable is
not generic if it occurs in any of the non-generic terms: those belong to an
enclosing lambda, so the copy must share them rather than replace them.
"""
from typing import Iterable, Optional
from boozetools.support.foundation import Visitor
from .algebra import TypeGraph, Unknown, Applied

class Instantiator(Visitor):
	def __init__(self, graph:TypeGraph, non_generic:Iterable[int], mapping:dict[int, int]):
		self._graph = graph
		self._non_generic = tuple(non_generic)
		self._mapping = mapping

	def fresh(self, term:int) -> int:
		root = self._graph.find(term)
		return self.visit(self._graph.shape(root), root)

	def visit_Unknown(self, slot:Unknown, root:int):
		if self._graph.occurs_in_any(root, self._non_generic):
			return root
		if root not in self._mapping:
			self._mapping[root] = self._graph.variable()
		return self._mapping[root]

	def visit_Applied(self, slot:Applied, root:int):
		arguments = [self.fresh(a) for a in slot.arguments]
		result = None if slot.result is None else self.fresh(slot.result)
		return self._graph.constructor(slot.name, arguments, result)

def instantiate(graph:TypeGraph, term:int, non_generic:Iterable[int], mapping:Optional[dict[int, int]]=None) -> int:
	"""
	The mapping goes from (representative) original variable to its replacement.
	It is what keeps ``a -> a`` coming out as ``b -> b`` rather than ``b -> c``.
	Pass one in only to share replacements across several related calls.
	"""
	if mapping is None:
		mapping = {}
	return Instantiator(graph, non_generic, mapping).fresh(term)
