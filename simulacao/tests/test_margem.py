"""
Implements tests for the margin simulation panel.
"""
# thirty
from django.test import SimpleTestCase

# local
from simulacao.calcs import calc_payment_for_value, calc_present_value
from simulacao.exceptions import PrazoInvalidoException
from simulacao.handlers.margem import simular_margem
from simulacao.tests.base_test import BaseTestContext


class SimularMargemTest(SimpleTestCase, BaseTestContext):
    def test_installment_uses_refin_rate(self):
        simulacao = simular_margem(self.taxas_padrao(), prazo=84, parcela=300.0)

        self.assertEqual(simulacao.prazo, 84)
        self.assertAlmostEqual(
            simulacao.valor_liberado_aproximado, calc_present_value(0.015, 84, 300.0)
        )
        self.assertEqual(simulacao.valor_por_margem, 0)
        self.assertEqual(simulacao.parcela_por_valor, 0)

    def test_margin_and_desired_value_use_new_rate(self):
        simulacao = simular_margem(
            self.taxas_padrao(), margem=150.0, valor_desejado=10000.0
        )

        self.assertEqual(simulacao.prazo, 96)
        self.assertAlmostEqual(
            simulacao.valor_por_margem, calc_present_value(0.018, 96, 150.0)
        )
        self.assertAlmostEqual(
            simulacao.parcela_por_valor, calc_payment_for_value(0.018, 96, 10000.0)
        )

    def test_without_rates(self):
        simulacao = simular_margem(None, parcela=300.0, margem=150.0)

        self.assertEqual(
            simulacao.as_dict(),
            {
                'prazo': 96,
                'valor_liberado_aproximado': 0.0,
                'valor_por_margem': 0.0,
                'parcela_por_valor': 0.0,
            },
        )

    def test_invalid_term(self):
        with self.assertRaises(PrazoInvalidoException):
            simular_margem(self.taxas_padrao(), prazo=90, parcela=300.0)
