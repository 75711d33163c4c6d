import unittest

from hindley.algebra import TypeGraph
from hindley.instantiation import instantiate

class InstantiateTests(unittest.TestCase):
	def setUp(self) -> None:
		self.graph = TypeGraph()

	def test_generic_variables_are_replaced_consistently(self):
		g = self.graph
		a = g.variable()
		scheme = g.function([a], a)
		copy = instantiate(g, scheme, frozenset())
		shape = g.shape(copy)
		self.assertNotEqual(g.find(a), g.find(shape.arguments[0]))
		self.assertEqual(g.find(shape.arguments[0]), g.find(shape.result))
		self.assertEqual("Function(?a) -> ?a", g.render(copy))

	def test_two_instances_are_equal_but_distinct(self):
		g = self.graph
		a, b = g.variable(), g.variable()
		scheme = g.function([a, b], a)
		first = instantiate(g, scheme, frozenset())
		second = instantiate(g, scheme, frozenset())
		self.assertEqual(g.render(first), g.render(second))
		for x, y in zip(g.shape(first).arguments, g.shape(second).arguments):
			self.assertNotEqual(g.find(x), g.find(y))

	def test_non_generic_variables_are_shared(self):
		g = self.graph
		a, b = g.variable(), g.variable()
		scheme = g.function([a, b], a)
		first = instantiate(g, scheme, frozenset([a]))
		second = instantiate(g, scheme, frozenset([a]))
		self.assertEqual(g.find(a), g.find(g.shape(first).arguments[0]))
		self.assertEqual(g.find(a), g.find(g.shape(second).arguments[0]))
		self.assertNotEqual(g.find(g.shape(first).arguments[1]), g.find(g.shape(second).arguments[1]))

	def test_variable_inside_a_non_generic_term_is_shared(self):
		g = self.graph
		a, pinned = g.variable(), g.variable()
		g.bind(pinned, g.constructor("Box", [a]))
		copy = instantiate(g, a, frozenset([pinned]))
		self.assertEqual(g.find(a), copy)

	def test_binding_a_shared_variable_shows_in_the_scheme(self):
		g = self.graph
		a = g.variable()
		copy = instantiate(g, g.function([a], g.integer()), [a])
		g.bind(g.shape(copy).arguments[0], g.integer())
		self.assertEqual("Integer", g.render(a))

	def test_constructors_are_copied(self):
		g = self.graph
		i = g.integer()
		copy = instantiate(g, i, frozenset())
		self.assertNotEqual(i, copy)
		self.assertEqual("Integer", g.render(copy))

	def test_bound_variables_are_followed(self):
		g = self.graph
		a, b = g.variable(), g.variable()
		g.bind(a, g.function([b], b))
		self.assertEqual("Function(?a) -> ?a", g.render(instantiate(g, a, ())))

	def test_mapping_may_be_shared_across_calls(self):
		g = self.graph
		a = g.variable()
		mapping = {}
		first = instantiate(g, a, (), mapping)
		second = instantiate(g, g.constructor("Box", [a]), (), mapping)
		self.assertEqual(first, g.find(g.shape(second).arguments[0]))
		self.assertEqual({g.find(a): first}, mapping)


if __name__ == '__main__':
	unittest.main()
