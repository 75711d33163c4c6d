import unittest

from hindley.algebra import TypeGraph, Render, Unknown, Applied, INTEGER, FUNCTION

class TypeGraphTests(unittest.TestCase):
	def setUp(self) -> None:
		self.graph = TypeGraph()

	def test_variable_and_constructor(self):
		g = self.graph
		v = g.variable()
		i = g.integer()
		self.assertTrue(g.is_variable(v))
		self.assertFalse(g.is_variable(i))
		self.assertIsInstance(g.shape(v), Unknown)
		self.assertEqual(Applied(INTEGER, (), None), g.shape(i))

	def test_every_variable_is_distinct(self):
		g = self.graph
		self.assertNotEqual(g.find(g.variable()), g.find(g.variable()))

	def test_function_carries_a_result(self):
		g = self.graph
		a = g.variable()
		fn = g.function([a], g.integer())
		shape = g.shape(fn)
		self.assertEqual(FUNCTION, shape.name)
		self.assertEqual((a,), shape.arguments)
		self.assertIsNotNone(shape.result)

	def test_foreign_handles_are_refused(self):
		with self.assertRaises(ValueError):
			self.graph.constructor("Pair", [7])

	def test_binding_is_visible_through_every_alias(self):
		g = self.graph
		a, b, c = g.variable(), g.variable(), g.variable()
		g.bind(a, b)
		g.bind(b, c)
		i = g.integer()
		g.bind(c, i)
		for v in (a, b, c):
			self.assertEqual(i, g.find(v))
			self.assertFalse(g.is_variable(v))

	def test_only_a_variable_may_be_bound(self):
		g = self.graph
		with self.assertRaises(AssertionError):
			g.bind(g.integer(), g.variable())

	def test_occurs_in(self):
		g = self.graph
		v, w = g.variable(), g.variable()
		self.assertTrue(g.occurs_in(v, v))
		self.assertFalse(g.occurs_in(v, w))
		self.assertTrue(g.occurs_in(v, g.function([v], g.integer())))
		self.assertFalse(g.occurs_in(v, g.function([w], g.integer())))
		nested = g.constructor("Box", [g.function([g.integer()], v)])
		self.assertTrue(g.occurs_in(v, nested))

	def test_occurs_in_sees_through_bindings(self):
		g = self.graph
		v, w = g.variable(), g.variable()
		g.bind(w, g.function([v], v))
		self.assertTrue(g.occurs_in(v, w))

	def test_occurs_in_any(self):
		g = self.graph
		v, w = g.variable(), g.variable()
		self.assertFalse(g.occurs_in_any(v, []))
		self.assertFalse(g.occurs_in_any(v, [w, g.integer()]))
		self.assertTrue(g.occurs_in_any(v, [w, g.constructor("Box", [v])]))

class RenderTests(unittest.TestCase):
	def test_shapes(self):
		g = TypeGraph()
		a, b = g.variable(), g.variable()
		self.assertEqual("Integer", g.render(g.integer()))
		self.assertEqual("?a", g.render(a))
		self.assertEqual("Function(?a, ?b) -> ?a", g.render(g.function([a, b], a)))
		self.assertEqual("Function() -> Integer", g.render(g.function([], g.integer())))
		self.assertEqual("Pair(Integer, ?a)", g.render(g.constructor("Pair", [g.integer(), b])))

	def test_shared_variables_render_alike(self):
		g = TypeGraph()
		a = g.variable()
		render = Render(g)
		first = render(g.function([a], g.integer()))
		second = render(g.constructor("Box", [a]))
		self.assertEqual("Function(?a) -> Integer", first)
		self.assertEqual("Box(?a)", second)

	def test_bound_variables_render_as_what_they_stand_for(self):
		g = TypeGraph()
		a = g.variable()
		fn = g.function([a], a)
		g.bind(a, g.integer())
		self.assertEqual("Function(Integer) -> Integer", g.render(fn))

	def test_many_variables(self):
		g = TypeGraph()
		render = Render(g)
		names = [render(g.variable()) for _ in range(28)]
		self.assertEqual("?z", names[25])
		self.assertEqual("?aa", names[26])
		self.assertEqual("?ab", names[27])


if __name__ == '__main__':
	unittest.main()
