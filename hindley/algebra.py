"""
Type terms, kept in an arena.

Every type is an integer handle into a TypeGraph. The slot behind a handle
says what is known about that type:

	Unknown   -- a type-variable: nothing known yet.
	Applied   -- a constructor with its arguments and (for functions) a result.
	Alias     -- left behind when a variable was bound to something else.

Holders keep the handle, never the slot. Binding a variable rewrites its
slot into an Alias, so everyone who mentions that variable sees the binding.
Only a variable's slot is ever rewritten.
"""
from typing import NamedTuple, Optional, Sequence, Iterable
from boozetools.support.foundation import Visitor

INTEGER = "Integer"
FUNCTION = "Function"

class Unknown(NamedTuple):
	nr: int  # The handle this variable was born with; handy for debugging.
	def __repr__(self): return "<%d>" % self.nr

class Applied(NamedTuple):
	name: str
	arguments: tuple[int, ...]
	result: Optional[int] = None
	def children(self) -> tuple[int, ...]:
		return self.arguments if self.result is None else self.arguments + (self.result,)

class Alias(NamedTuple):
	target: int

class TypeGraph:
	"""
	The arena. One of these per inference pass.
	Passes over separate graphs share nothing, so they may run side-by-side.
	"""

	def __init__(self):
		self._slots = []

	def __len__(self): return len(self._slots)

	def _allocate(self, slot) -> int:
		handle = len(self._slots)
		self._slots.append(slot)
		return handle

	def variable(self) -> int:
		return self._allocate(Unknown(len(self._slots)))

	def constructor(self, name:str, arguments:Iterable[int]=(), result:Optional[int]=None) -> int:
		assert isinstance(name, str) and name, name
		arguments = tuple(arguments)
		for a in arguments: self._check(a)
		if result is not None: self._check(result)
		return self._allocate(Applied(name, arguments, result))

	def integer(self) -> int:
		return self.constructor(INTEGER)

	def function(self, arguments:Iterable[int], result:int) -> int:
		return self.constructor(FUNCTION, arguments, result)

	def _check(self, term):
		if not (isinstance(term, int) and 0 <= term < len(self._slots)):
			raise ValueError("Not a term in this graph: %r" % (term,))

	def find(self, term:int) -> int:
		""" Follow aliases to the representative handle, compressing the path along the way. """
		root = term
		while isinstance(self._slots[root], Alias):
			root = self._slots[root].target
		while term != root:
			step = self._slots[term].target
			self._slots[term] = Alias(root)
			term = step
		return root

	def shape(self, term:int):
		""" The slot of the representative: either Unknown or Applied. """
		return self._slots[self.find(term)]

	def is_variable(self, term:int) -> bool:
		return isinstance(self.shape(term), Unknown)

	def occurs_in(self, var:int, term:int) -> bool:
		"""
		True if var is term, or term is an application
		that mentions var somewhere among its arguments or result.
		"""
		var = self.find(var)
		pending, seen = [term], set()
		while pending:
			term = self.find(pending.pop())
			if term == var:
				return True
			if term in seen:
				continue
			seen.add(term)
			slot = self._slots[term]
			if isinstance(slot, Applied):
				pending.extend(slot.children())
		return False

	def occurs_in_any(self, var:int, terms:Iterable[int]) -> bool:
		return any(self.occurs_in(var, t) for t in terms)

	def bind(self, var:int, term:int):
		""" Make a variable stand for term. The unifier checks for cycles first; this does not. """
		var = self.find(var)
		assert isinstance(self._slots[var], Unknown), "Only a type-variable can be bound."
		self._slots[var] = Alias(self.find(term))

	def render(self, term:int) -> str:
		return Render(self)(term)

#########################

def _name_variable(n):
	name = ""
	while n:
		n, remainder = divmod(n-1, 26)
		name = chr(97+remainder) + name
	return name

class Render(Visitor):
	"""
	Return a string representation of a term.
	Variables get names in order of first appearance, and keep them for the
	life of this object: render several related terms with the same instance
	and the same variable reads the same everywhere.
	"""
	def __init__(self, graph:TypeGraph):
		self._graph = graph
		self.delta = {}

	def __call__(self, term:int) -> str:
		root = self._graph.find(term)
		return self.visit(self._graph.shape(root), root)

	def visit_Unknown(self, slot:Unknown, root:int):
		if root not in self.delta:
			self.delta[root] = "?%s" % _name_variable(len(self.delta)+1)
		return self.delta[root]

	def visit_Applied(self, slot:Applied, root:int):
		text = slot.name
		if slot.arguments or slot.result is not None:
			text += "(%s)" % ", ".join(self(a) for a in slot.arguments)
		if slot.result is not None:
			text += " -> " + self(slot.result)
		return text

def render_all(graph:TypeGraph, terms:Sequence[int]) -> list[str]:
	render = Render(graph)
	return [render(t) for t in terms]
