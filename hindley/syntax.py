"""
The expression tree, in simple form.

Whatever builds programs (the JSON loader, the samples, a test) calls these
constructors directly. There are exactly five forms; adding a sixth means
adding one more visit_ method to each visitor that walks the tree.
"""
from typing import Sequence
from boozetools.support.foundation import Visitor

class Expression:
	def __repr__(self): return Transcript(self).text

class Literal(Expression):
	def __init__(self, value:int):
		if isinstance(value, bool) or not isinstance(value, int):
			raise TypeError(value)
		self.value = value

class Lookup(Expression):
	def __init__(self, name:str):
		if not isinstance(name, str):
			raise TypeError(name)
		self.name = name

class Let(Expression):
	def __init__(self, name:str, value:Expression, body:Expression):
		if not isinstance(name, str):
			raise TypeError(name)
		self.name, self.value, self.body = name, value, body

class Lambda(Expression):
	def __init__(self, parameters:Sequence[str], body:Expression):
		self.parameters = tuple(parameters)
		if not all(isinstance(p, str) for p in self.parameters):
			raise TypeError(parameters)
		self.body = body

class Call(Expression):
	def __init__(self, fn_exp:Expression, args:Sequence[Expression]):
		self.fn_exp = fn_exp
		self.args = tuple(args)

class Transcript(Visitor):
	"""
	Spell an expression as text, noting where each sub-expression lands.
	The spans let diagnostics point at the guilty part of a program.
	"""
	def __init__(self, root:Expression):
		self.spans: dict[Expression, slice] = {}
		self._parts = []
		self._offset = 0
		self.write(root)
		self.text = "".join(self._parts)

	def _emit(self, text:str):
		self._parts.append(text)
		self._offset += len(text)

	def write(self, expr:Expression):
		start = self._offset
		self.visit(expr)
		self.spans[expr] = slice(start, self._offset)

	def visit_Literal(self, expr:Literal):
		self._emit(str(expr.value))

	def visit_Lookup(self, expr:Lookup):
		self._emit(expr.name)

	def visit_Let(self, expr:Let):
		self._emit("let %s = " % expr.name)
		self.write(expr.value)
		self._emit(" in ")
		self.write(expr.body)

	def visit_Lambda(self, expr:Lambda):
		self._emit("λ(%s). " % ", ".join(expr.parameters))
		self.write(expr.body)

	def visit_Call(self, expr:Call):
		# A let or lambda in function position would swallow the argument list.
		if isinstance(expr.fn_exp, (Let, Lambda)):
			self._emit("(")
			self.write(expr.fn_exp)
			self._emit(")")
		else:
			self.write(expr.fn_exp)
		self._emit("(")
		for i, a in enumerate(expr.args):
			if i: self._emit(", ")
			self.write(a)
		self._emit(")")
