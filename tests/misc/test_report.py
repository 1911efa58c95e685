from dedekind.report import Report, render, INVARIANTS
from dedekind.math.polynomial import Polynomial, X
from dedekind.utilities.exceptions import InvalidPolynomialException
from fractions import Fraction
import unittest


class ReportTestCase(unittest.TestCase):
    def test_render(self):
        self.assertEqual(render(Fraction(-1132)), '-1132')
        self.assertEqual(render(Fraction(3, 4)), '3/4')
        self.assertEqual(render((1, 1)), '[1, 1]')
        self.assertEqual(render(10**40), str(10**40))
        self.assertEqual(render([Polynomial([1]), X]), '[1, x]')


    def test_polynomial_invariants_of_non_monic(self):
        report = Report(Polynomial([3, -2, 1, 2]))
        values = report.compute(['polynomial', 'degree', 'discriminant', 'signature'])
        self.assertEqual(list(values), ['polynomial', 'degree', 'discriminant', 'signature'])
        self.assertEqual(values['polynomial'], '2*x^3 + x^2 - 2*x + 3')
        self.assertEqual(values['degree'], '3')
        self.assertEqual(values['discriminant'], '-1132')
        self.assertEqual(values['signature'], '[1, 1]')

        with self.assertRaises(InvalidPolynomialException):
            report.compute(['field_discriminant'])


    def test_field_invariants(self):
        values = Report(X**2 + 23).compute(['field_discriminant', 'index', 'integral_basis', 'class_number', 'class_group'])
        self.assertEqual(values, {
            'field_discriminant': '-23',
            'index': '2',
            'integral_basis': '[1, 1/2*x + 1/2]',
            'class_number': '3',
            'class_group': 'C3'
        })


    def test_resultant(self):
        report = Report(Polynomial([5, 0, 2, 0, 6, 9]), other=Polynomial([6, 6, 6, 1, 7]))
        self.assertEqual(report.compute(['resultant']), {'resultant': '335159672'})

        with self.assertRaises(ValueError):
            Report(X**2 + 1).compute(['resultant'])


    def test_unknown_invariant(self):
        with self.assertRaises(ValueError):
            Report(X**2 + 1).compute(['regulator'])


    def test_roots(self):
        values = Report(X**2 - 4).compute(['roots'])
        self.assertEqual(values['roots'], '[-2, 2]')


    def test_all_names_are_computable(self):
        report = Report(X**2 + 5, other=X - 1)
        values = report.compute(list(INVARIANTS))
        self.assertEqual(list(values), list(INVARIANTS))
        self.assertEqual(values['class_number'], '2')
