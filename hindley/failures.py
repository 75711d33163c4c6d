"""
The ways an inference pass can fail.

All of them are ordinary, expected outcomes of feeding a program to the
type-checker, so each is an exception the caller may catch. None is
recovered from inside the engine: whatever unification already did stays
done, and the graph of a failed pass is only good for explaining the failure.
"""
from .algebra import TypeGraph, render_all

class InferenceError(Exception):
	gripe: str
	caption: str
	at = None  # The expression to blame, if known.

	def describe(self) -> str:
		raise NotImplementedError(type(self))

	def __str__(self): return self.describe()

class UnboundIdentifier(InferenceError):
	gripe = "I don't see what %r refers to."
	caption = "not bound here"
	def __init__(self, name:str, at=None):
		super().__init__(name)
		self.name, self.at = name, at
	def describe(self): return self.gripe % self.name

class DuplicateBinding(InferenceError):
	gripe = "The name %r is already bound in this scope."
	caption = "bound again here"
	def __init__(self, name:str, at=None):
		super().__init__(name)
		self.name, self.at = name, at
	def describe(self): return self.gripe % self.name

class UnificationFailed(InferenceError):
	caption = "in this call"
	def __init__(self, graph:TypeGraph, prior:int, term:int, at=None):
		super().__init__(prior, term)
		self.graph, self.prior, self.term, self.at = graph, prior, term, at
	def describe(self):
		return self.gripe % tuple(render_all(self.graph, (self.prior, self.term)))

class SelfUnification(UnificationFailed):
	gripe = "This tries to unify %s with %s, which is the very same variable."

class OccursCheckFailure(UnificationFailed):
	gripe = "This tries to equate %s with %s which contains it, but a type cannot be part of itself."

class TypeMismatch(UnificationFailed):
	gripe = "This tries to be both %s and also %s, which cannot happen."
